"""Creative Boost credit accounting service"""
