# -*- coding: utf-8 -*-
"""
每日单词模块
"""
