from .session import get_customer_access_token


def customer_session(request):
    """Expose whether a storefront customer is signed in to all templates."""
    return {"customer_logged_in": bool(get_customer_access_token(request))}
