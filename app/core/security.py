from fastapi import Header


def get_actor(x_user_email: str | None = Header(default=None)) -> str | None:
    """
    Optional attribution for audit events.
    Example: X-User-Email: hr.admin@company.com
    """
    if not x_user_email:
        return None
    return x_user_email.strip() or None
