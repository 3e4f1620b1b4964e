"""util package.

Modules:
    - errors: The exceptions raised by modcrypto.
    - parameters: Configuration dataclasses (defaults for prime generation).
    - utility_functions: Argument validation and hex decoding helpers.
"""
