import secrets
from typing import Optional

from fastapi import Header, HTTPException, Request, status

from faq.matcher import FAQMatcher

from .config import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_faq_matcher(request: Request) -> FAQMatcher:
    return request.app.state.faq_matcher


def verify_operator_token(
    request: Request,
    x_operator_token: Optional[str] = Header(None, alias="X-Operator-Token"),
):
    expected = get_app_settings(request).operator_history_token
    if not expected or not x_operator_token or not secrets.compare_digest(
        x_operator_token.encode(), expected.encode()
    ):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid operator token")
