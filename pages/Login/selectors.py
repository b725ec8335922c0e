# pages/Login/selectors.py

# Angular reactive form: match on formcontrolname rather than generated ids
USERNAME_INPUT_XPATH = "//input[contains(@formcontrolname,'userName')]"
PASSWORD_INPUT_XPATH = "//input[contains(@formcontrolname,'password')]"

# Submit is a Material button; the label span is the stable hook
LOGIN_BUTTON_XPATH = "//span[contains(text(),'Login')]"

# Fragment the URL keeps while the user is still on the login screen
LOGIN_PATH_FRAGMENT = "login"
