# -*- coding: utf-8 -*-
"""
Research Project Wizard Service Layer
"""
