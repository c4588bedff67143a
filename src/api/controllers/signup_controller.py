from src.api.controllers.controller import IController
from src.api.error import invalid_param, missing_param
from src.api.utils.http_helper import (
    HttpRequest,
    HttpResponse,
    bad_request,
    ok,
    server_error,
)
from src.app.services.email_validator import IEmailValidator
from src.app.use_cases.accounts import IAddAccount
from src.domain.entities import AccountDraft


class SignupController(IController):
    """
    Signup request handler

    Validation order (first failure wins):
    1. name, email, password, passwordConfirmation present -> MissingParam
    2. password matches passwordConfirmation -> InvalidParam
    3. email syntactically valid -> InvalidParam
    Then registers the account and returns it with 200.

    Validation failures are returned as 400 envelopes. Anything raised while
    validating or registering becomes a 500 envelope.
    """

    REQUIRED_FIELDS = ("name", "email", "password", "passwordConfirmation")

    def __init__(self, email_validator: IEmailValidator, add_account: IAddAccount):
        self.email_validator = email_validator
        self.add_account = add_account

    async def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            body = request.body

            # None and "" count as absent
            for field in self.REQUIRED_FIELDS:
                if not body.get(field):
                    return bad_request(missing_param(field))

            name = body["name"]
            email = body["email"]
            password = body["password"]

            if password != body["passwordConfirmation"]:
                return bad_request(invalid_param("passwordConfirmation"))

            if not self.email_validator.is_valid(email):
                return bad_request(invalid_param("email"))

            account = await self.add_account.add(
                AccountDraft(name=name, email=email, password=password)
            )
            return ok(account)
        except Exception as error:
            return server_error(error)
