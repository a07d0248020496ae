"""Budget computation and budget period services"""
