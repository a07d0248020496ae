"""Account services"""
