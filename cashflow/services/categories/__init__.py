"""Category services"""
