"""Record stores for the portal"""
