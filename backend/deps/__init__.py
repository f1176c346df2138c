# -*- coding: utf-8 -*-
"""
依赖注入模块
"""
