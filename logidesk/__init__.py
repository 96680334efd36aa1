"""LogiDesk backend"""
