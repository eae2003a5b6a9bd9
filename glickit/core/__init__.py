"""rating engine: values, accumulation and the volatility solver"""
