"""
Repnum: display a number in decimal, hexadecimal, octal and binary.
"""
