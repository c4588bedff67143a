from fastapi import APIRouter

from src.api.utils.route_adapter import adapt_route
from src.depends import get_signup_controller

router = APIRouter(tags=["Signup"])

# Request body: {name, email, password, passwordConfirmation}
# Responses: 200 Account, 400 MissingParam/InvalidParam, 500 ServerError
router.add_api_route(
    "/signup",
    adapt_route(get_signup_controller),
    methods=["POST"],
    summary="Register a new account",
)
