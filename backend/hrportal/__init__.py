"""
HR Recruitment Portal backend
"""
