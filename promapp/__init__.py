# -*- coding: utf-8 -*-
"""Process Manager process update toolkit."""

__version__ = "0.1.0"
