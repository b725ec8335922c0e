# pages/Login/elements/Validation/selectors.py

# Error renderings seen across component libraries (custom, Angular Material, Bootstrap).
DEFAULT_VALIDATION_SELECTORS = (
    ".error-text",
    "mat-error",
    ".mat-error",
    ".alert",
    ".alert-danger",
    ".text-danger",
    '[class*="error"]',
    '[class*="invalid"]',
)
