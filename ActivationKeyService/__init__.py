"""
Activation Key Service Django project.
"""
