CUSTOMER_ACCESS_TOKEN_SESSION_KEY = "customerAccessToken"


def get_customer_access_token(request) -> str | None:
    return request.session.get(CUSTOMER_ACCESS_TOKEN_SESSION_KEY) or None


def store_customer_access_token(request, token: str) -> None:
    # new session key on login
    request.session.cycle_key()
    request.session[CUSTOMER_ACCESS_TOKEN_SESSION_KEY] = token


def clear_customer_access_token(request) -> None:
    request.session.pop(CUSTOMER_ACCESS_TOKEN_SESSION_KEY, None)
