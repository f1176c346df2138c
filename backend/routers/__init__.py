# -*- coding: utf-8 -*-
"""
API 路由模块
"""
