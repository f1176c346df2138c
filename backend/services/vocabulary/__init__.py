# -*- coding: utf-8 -*-
"""
IPA词典模块
"""
