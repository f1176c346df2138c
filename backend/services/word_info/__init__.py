# -*- coding: utf-8 -*-
"""
单词信息聚合模块
"""
