# -*- coding: utf-8 -*-
"""
业务服务模块
"""
