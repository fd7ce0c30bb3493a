"""ISBN Check Digit - CLI/API helpers

- Complete-ISBN validation (validators.py)
- Output rendering for plain, JSON and rich modes (ui_helpers.py)
"""
