"""Transaction services"""
