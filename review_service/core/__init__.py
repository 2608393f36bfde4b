"""
Core module: configuration, logging, errors and instrumentation
"""
