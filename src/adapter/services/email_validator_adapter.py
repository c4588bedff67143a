from email_validator import EmailNotValidError, validate_email

from src.app.services.email_validator import IEmailValidator


class EmailValidatorAdapter(IEmailValidator):
    """Syntax-only email validation using the email-validator library"""

    def is_valid(self, email: str) -> bool:
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True
