from __future__ import annotations

from flask import Blueprint, get_flashed_messages, render_template_string, request, url_for
from werkzeug.security import check_password_hash

from demo.models import User
from simplest_auth import AuthMethodView, AuthenticationRequired, api_login_required, current_auth, current_user, login_required

bp = Blueprint("site", __name__)

LOGIN_PAGE = """
{% for category, message in messages %}<p class="flash {{ category }}">{{ message }}</p>{% endfor %}
<form method="post">
  <input name="email"> <input name="password" type="password"> <button>Log in</button>
</form>
"""


@bp.get("/")
def home():
    return render_template_string(
        "{% if logged_in %}Signed in as {{ current_user.email }}{% else %}Welcome{% endif %}"
    )


@bp.get("/login")
def login():
    messages = get_flashed_messages(with_categories=True)
    return render_template_string(LOGIN_PAGE, messages=messages)


@bp.post("/login")
def login_post():
    email = (request.form.get("email") or "").strip().lower()
    password = request.form.get("password") or ""
    user = User.query.filter_by(email=email).first()

    auth = current_auth()
    if not user or not check_password_hash(user.password_hash, password):
        auth.flash("Invalid email or password.", "error")
        return auth.redirect_to(url_for("site.login"))

    auth.current_user = user
    return auth.redirect_back_or_default(url_for("site.home"))


@bp.post("/logout")
def logout():
    auth = current_auth()
    auth.clear_session()
    return auth.redirect_to(url_for("site.home"))


@bp.get("/secret")
@login_required
def secret():
    auth = current_auth()
    # A session can outlive the user it names.
    if auth.current_user is None:
        return auth.access_denied()
    return f"secret for {current_user.email}"


@bp.get("/api/me")
@api_login_required
def api_me():
    user = current_auth().current_user
    if user is None:
        raise AuthenticationRequired("Invalid session")
    return {"id": user.id, "email": user.email}, 200


class AccountView(AuthMethodView):
    login_required_methods = {"POST"}

    def authorized(self) -> bool:
        return self.logged_in() and self.current_user is not None

    def get(self):
        if self.current_user is None:
            return "anonymous account page"
        return f"account of {self.current_user.email}"

    def post(self):
        return f"updated {self.current_user.email}"


class AdminView(AuthMethodView):
    def authorized(self) -> bool:
        return self.logged_in() and bool(self.current_user and self.current_user.is_admin)

    def get(self):
        return "admin area"


bp.add_url_rule("/account", view_func=AccountView.as_view("account"))
bp.add_url_rule("/admin", view_func=AdminView.as_view("admin"))
