"""
Client module - API client, identity provider, session and page views.

Usage:
    from vahub.client import VAHubClient, ClientSession, JobBoardView
    api = VAHubClient("http://localhost:8000")
    session = ClientSession(api)
    session.login("va@demo.com", "vademo")
"""
from vahub.client.api import ApiError, VAHubClient
from vahub.client.identity import (
    IdentityError, IdentityProvider, SupabaseIdentityProvider, user_from_identity
)
from vahub.client.messaging import MessagingView
from vahub.client.session import ClientSession
from vahub.client.views import (
    AdminDashboard, EmployerDashboard, JobBoardView, PricingView, TalentsView, VADashboard
)

__all__ = [
    "ApiError",
    "VAHubClient",
    "IdentityError",
    "IdentityProvider",
    "SupabaseIdentityProvider",
    "user_from_identity",
    "ClientSession",
    "AdminDashboard",
    "EmployerDashboard",
    "VADashboard",
    "JobBoardView",
    "TalentsView",
    "PricingView",
    "MessagingView",
]
