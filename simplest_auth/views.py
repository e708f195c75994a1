from __future__ import annotations

from flask import g
from flask.views import MethodView

from simplest_auth.ext import FlaskSessionAuth


class AuthMethodView(FlaskSessionAuth, MethodView):
    """Class-based view with the session auth helper mixed in.

    Flask builds a new view instance for every request, so the cached current
    user never outlives the request. Methods listed in
    `login_required_methods` (all of them when None) are gated by
    `login_required()` before dispatch.
    """

    login_required_methods: set[str] | None = None

    def dispatch_request(self, **kwargs):
        # Share this instance with current_auth() and the template context.
        g.simplest_auth = self

        method = self.request.method
        gated = self.login_required_methods is None or method in self.login_required_methods
        if gated and not self.login_required():
            return self.response
        return super().dispatch_request(**kwargs)
