"""Static file templates written into the generated project"""
