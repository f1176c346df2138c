# -*- coding: utf-8 -*-
"""
工具模块
"""
