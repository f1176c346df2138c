# -*- coding: utf-8 -*-
"""
发音评分模块
"""
