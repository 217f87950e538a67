"""
Operator Scripts
Pre-flight checks run before a deployment
"""
