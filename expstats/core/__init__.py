"""
Core types shared by every statistical component: names, input conversion and
result records.
"""
