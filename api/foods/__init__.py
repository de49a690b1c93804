"""
Food catalog feature: list foods and create new ones.
"""
