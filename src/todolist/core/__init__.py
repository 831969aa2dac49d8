"""
Core storage layer for todolist.
"""
