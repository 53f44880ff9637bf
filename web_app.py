from flask import Flask, request, render_template, jsonify
import math
import os
import logging
from tipcalculator.core import DEFAULT_TIP_PERCENT, calculate_tip_amount, compute_tip
from tipcalculator.form import TipForm, parse_flag, parse_number
from tipcalculator.formatting import LOCALE_ENV_VAR, format_money, resolve_locale

logger = logging.getLogger(__name__)

try:
    import sentry_sdk
    from sentry_sdk.integrations.flask import FlaskIntegration
except Exception:
    sentry_sdk = None


app = Flask(__name__)

# Locale used for currency formatting; None defers to the process locale
app.config["TIP_LOCALE"] = os.environ.get(LOCALE_ENV_VAR)

# Optional Basic Auth: set BASIC_AUTH_USERNAME and BASIC_AUTH_PASSWORD in env to enable
BASIC_AUTH_USERNAME = os.environ.get("BASIC_AUTH_USERNAME")
BASIC_AUTH_PASSWORD = os.environ.get("BASIC_AUTH_PASSWORD")

# Initialize Sentry if DSN provided
SENTRY_DSN = os.environ.get("SENTRY_DSN")
if SENTRY_DSN and sentry_sdk is not None:
    sentry_sdk.init(dsn=SENTRY_DSN, integrations=[FlaskIntegration()])


def _check_basic_auth():
    """Return True if auth is not enabled or if provided credentials match env vars."""
    if not (BASIC_AUTH_USERNAME and BASIC_AUTH_PASSWORD):
        return True
    auth = request.authorization
    if not auth:
        return False
    return auth.username == BASIC_AUTH_USERNAME and auth.password == BASIC_AUTH_PASSWORD


@app.before_request
def require_basic_auth():
    # Protect all routes when BASIC_AUTH_* are set
    if not _check_basic_auth():
        return "Unauthorized", 401, {"WWW-Authenticate": 'Basic realm="Login Required"'}


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def _form_from_request() -> TipForm:
    values = request.values
    return TipForm(
        amount_input=values.get("amount", ""),
        tip_input=values.get("tip", ""),
        round_up=parse_flag(values.get("round_up")),
        locale=app.config.get("TIP_LOCALE"),
    )


@app.route("/health", methods=["GET"])
def health():
    return jsonify(status="ok"), 200


@app.route("/ready", methods=["GET"])
def ready():
    # Readiness: Babel's CLDR data must load for the configured locale
    try:
        format_money(0, app.config.get("TIP_LOCALE"))
        return jsonify(ready=True), 200
    except Exception:
        logger.exception("Locale data unavailable")
        return jsonify(ready=False), 500


@app.route("/", methods=["GET", "POST"])
def index():
    form = _form_from_request()
    return render_template("index.html", form=form, tip=form.tip)


@app.route("/api/tip", methods=["GET", "POST"])
def api_tip():
    """Compute the tip for the current field values; the page calls this on every keystroke."""
    values = request.values
    locale = app.config.get("TIP_LOCALE")
    amount = parse_number(values.get("amount"))
    round_up = parse_flag(values.get("round_up"))
    # An omitted percentage uses the default; a blank or invalid one counts as 0
    tip_percent = parse_number(values["tip"]) if "tip" in values else DEFAULT_TIP_PERCENT

    tip = compute_tip(amount, tip_percent, round_up, locale=locale)
    tip_value = calculate_tip_amount(amount, tip_percent, round_up)
    logger.info(f"Computed tip {tip} for amount={amount} percent={tip_percent} round_up={round_up}")
    # NaN/Infinity are not valid JSON; echo them as 0 like the tip itself
    return jsonify(
        amount=_finite(amount),
        tip_percent=_finite(tip_percent),
        round_up=round_up,
        tip=tip,
        tip_value=f"{tip_value:f}",
        locale=str(resolve_locale(locale)),
    ), 200


if __name__ == "__main__":
    # Use PORT environment variable for cloud servers; default to 5000 for local dev
    port = int(os.environ.get("PORT", 5000))
    debug = os.environ.get("FLASK_ENV") == "development"
    app.run(host="0.0.0.0", port=port, debug=debug)
