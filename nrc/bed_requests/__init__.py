"""
Bed request module: worker requests for admission and their one-time review.
"""
