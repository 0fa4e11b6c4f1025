"""
Flask application for the Job Board UI.

Provides a card view of job postings with:
- Free-text search (title, company, tags)
- Location, job type and experience level filters
- Job detail view and apply (email or external link)
- Post-a-job form (validated, logged, not stored)

Stack: Flask + HTMX + Tailwind CSS (CDN)
"""

import os
import sys
import uuid
from functools import wraps
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from flask import (
    Flask,
    flash,
    g,
    jsonify,
    make_response,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

# Load environment variables
load_dotenv()

# Import version (from parent directory)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
try:
    from version import __version__
    APP_VERSION = __version__
except ImportError:
    APP_VERSION = "dev"

from jobboard.apply import (
    ApplicationAction,
    ComposeEmail,
    NoAction,
    OpenExternal,
    resolve_application_action,
)
from jobboard.auth import AuthContext, SessionAuthProvider
from jobboard.config import get_settings, validate_config_on_startup
from jobboard.errors import AuthenticationError, FormValidationError, JobBoardError, JobNotFoundError
from jobboard.filters import FilterCriteria, filter_jobs
from jobboard.formatting import (
    format_experience_level,
    format_job_type,
    format_posted_date,
    format_remote,
    format_salary,
)
from jobboard.forms import parse_job_form
from jobboard.logger import get_logger, setup_logging
from jobboard.models import EXPERIENCE_LEVEL_OPTIONS, JOB_TYPE_OPTIONS, Job
from jobboard.repositories import JobRepositoryInterface, get_job_repository

settings = validate_config_on_startup()
setup_logging(settings.log_level, settings.log_format)

app = Flask(__name__)
logger = get_logger(__name__)

# Session configuration
flask_secret_key = settings.flask_secret_key

if not flask_secret_key:
    # validate_config_on_startup() already refuses to start production without a key
    logger.warning(
        "FLASK_SECRET_KEY not set. Generating random key (sessions will not persist between restarts)"
    )
    flask_secret_key = os.urandom(24).hex()

app.secret_key = flask_secret_key

# Cookie security settings
app.config["SESSION_COOKIE_HTTPONLY"] = True
app.config["SESSION_COOKIE_SECURE"] = settings.is_production
app.config["SESSION_COOKIE_SAMESITE"] = "Lax"
app.config["PERMANENT_SESSION_LIFETIME"] = 60 * 60 * 24 * 31  # 31 days


@app.context_processor
def inject_template_helpers():
    """Inject version info and display helpers into all templates."""
    return {
        "version": APP_VERSION,
        "format_salary": format_salary,
        "format_job_type": format_job_type,
        "format_experience_level": format_experience_level,
        "format_remote": format_remote,
        "format_posted_date": format_posted_date,
    }


def _get_repo() -> JobRepositoryInterface:
    """Get the job repository (patched in tests)."""
    return get_job_repository()


def _request_logger(component: Optional[str] = None):
    return get_logger(__name__, request_id=g.get("request_id"), component=component)


# ============================================================================
# Authentication
# ============================================================================

@app.before_request
def attach_auth_context():
    """Give each request its own auth context subscribed to the session provider."""
    g.request_id = uuid.uuid4().hex
    provider = SessionAuthProvider(session, password=get_settings().login_password)
    g.auth = AuthContext(provider).attach()


@app.teardown_request
def detach_auth_context(exc: Optional[BaseException]):
    auth = g.pop("auth", None)
    if auth is not None:
        auth.detach()


def login_required(f):
    """
    Decorator to require authentication for routes.

    The current AuthContext is passed to the view as the `auth` keyword.

    For API routes (/api/*): Returns JSON 401 if not authenticated
    For page routes: Redirects to login page if not authenticated
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        auth: AuthContext = g.auth
        if auth.is_loading:
            if request.path.startswith('/api/'):
                return jsonify({"error": "Authentication state loading"}), 503
            return render_template("loading.html"), 503
        if auth.user is None:
            # For API endpoints, return JSON error instead of redirect
            if request.path.startswith('/api/'):
                return jsonify({"error": "Not authenticated"}), 401
            return redirect(url_for("login_page"))
        return f(*args, auth=auth, **kwargs)
    return decorated_function


# ============================================================================
# Helpers
# ============================================================================

def serialize_action(action: ApplicationAction) -> Dict[str, Any]:
    """Serialize a dispatcher decision for JSON responses."""
    if isinstance(action, ComposeEmail):
        return {
            "kind": action.kind,
            "to": action.to,
            "subject": action.subject,
            "body": action.body,
            "href": action.mailto_uri(),
        }
    if isinstance(action, OpenExternal):
        return {"kind": action.kind, "href": action.url}
    return {"kind": action.kind, "reason": action.reason}


def serialize_job(job: Job) -> Dict[str, Any]:
    """
    Serialize a job for JSON response.

    Adds the display strings the board renders next to the raw fields.
    """
    result = job.to_public_dict()
    result["formattedSalary"] = format_salary(job.salary_min, job.salary_max, job.salary_currency)
    result["jobTypeLabel"] = format_job_type(job.job_type)
    result["experienceLevelLabel"] = format_experience_level(job.experience_level)
    result["postedDate"] = format_posted_date(job.created_at)
    result["applyAction"] = serialize_action(resolve_application_action(job))
    return result


def _load_job(job_id: str) -> Job:
    job = _get_repo().get_job(job_id)
    if job is None:
        raise JobNotFoundError(job_id)
    return job


def _filtered_board() -> Dict[str, Any]:
    """Recompute the visible jobs for the current query string."""
    jobs = _get_repo().list_jobs()
    criteria = FilterCriteria.from_args(request.args)
    filtered = filter_jobs(jobs, criteria)
    return {"jobs": jobs, "filtered": filtered, "criteria": criteria}


def _apply_link(job: Job) -> Optional[Dict[str, str]]:
    """Template helper: href/target for the Apply Now button, or None."""
    action = resolve_application_action(job)
    if isinstance(action, NoAction):
        return None
    target = "_blank" if isinstance(action, OpenExternal) else "_self"
    return {"href": url_for("apply_to_job", job_id=job.id), "target": target}


app.jinja_env.globals["apply_link"] = _apply_link


# ============================================================================
# Error Handling
# ============================================================================

@app.errorhandler(JobBoardError)
def handle_job_board_error(e: JobBoardError):
    """JSON for API routes, error page for everything else."""
    if e.status_code >= 500:
        _request_logger().error(f"{type(e).__name__}: {e}", exc_info=e)
    else:
        _request_logger().info(f"{type(e).__name__}: {e}")

    if request.path.startswith('/api/'):
        return jsonify(e.to_dict()), e.status_code
    return render_template("error.html", error=str(e)), e.status_code


# ============================================================================
# API Endpoints
# ============================================================================

@app.route("/api/jobs", methods=["GET"])
@login_required
def list_jobs(auth: AuthContext):
    """
    List jobs matching the filter inputs.

    Query Parameters:
        query: Free-text search (title, company, tags)
        location: Location substring
        job_type: Exact job type (full-time, part-time, contract, internship)
        experience: Exact experience level (entry, mid, senior, executive)

    Returns:
        JSON with jobs array and counts
    """
    board = _filtered_board()
    return jsonify({
        "jobs": [serialize_job(job) for job in board["filtered"]],
        "filtered_count": len(board["filtered"]),
        "total_count": len(board["jobs"]),
        "criteria": board["criteria"].to_query_params(),
    })


@app.route("/api/jobs", methods=["POST"])
@login_required
def create_job(auth: AuthContext):
    """
    Submit a job posting.

    Accepts a JSON body or form fields with the post-job field names.

    Returns:
        201 with the created job, 400 with per-field errors
    """
    payload = request.get_json(silent=True)
    if payload is None:
        payload = request.form.to_dict()

    draft = parse_job_form(payload)
    job = _get_repo().create(draft, user_id=auth.user.id)
    return jsonify({"success": True, "job": serialize_job(job)}), 201


@app.route("/api/jobs/<job_id>", methods=["GET"])
@login_required
def get_job(job_id: str, auth: AuthContext):
    """Get a single job with display fields."""
    return jsonify({"job": serialize_job(_load_job(job_id))})


@app.route("/api/jobs/<job_id>/apply", methods=["GET"])
@login_required
def get_apply_action(job_id: str, auth: AuthContext):
    """Return the apply action for a job without performing it."""
    job = _load_job(job_id)
    return jsonify({"job_id": job.id, "action": serialize_action(resolve_application_action(job))})


@app.route("/api/filter-options", methods=["GET"])
@login_required
def get_filter_options(auth: AuthContext):
    """Select options for the job type and experience filters."""
    return jsonify({
        "job_types": [{"value": v, "label": label} for v, label in JOB_TYPE_OPTIONS],
        "experience_levels": [{"value": v, "label": label} for v, label in EXPERIENCE_LEVEL_OPTIONS],
    })


@app.route("/health", methods=["GET"])
def public_health_check():
    """Unauthenticated liveness check."""
    return jsonify({
        "status": "ok",
        "service": "job-board",
        "version": APP_VERSION,
        "jobs": len(_get_repo().list_jobs()),
    })


# ============================================================================
# Authentication Routes
# ============================================================================

@app.route("/login", methods=["GET", "POST"])
def login_page():
    """Handle sign-in page and authentication."""
    auth: AuthContext = g.auth
    if request.method == "GET":
        if auth.user is not None:
            return redirect(url_for("index"))
        return render_template("login.html", error=None)

    email = request.form.get("email", "")
    try:
        auth.provider.login(email=email, password=request.form.get("password", ""))
    except AuthenticationError as e:
        return render_template("login.html", error=str(e), email=email), 401
    return redirect(url_for("index"))


@app.route("/logout", methods=["POST"])
def logout():
    """Handle sign-out."""
    g.auth.provider.logout()
    return redirect(url_for("login_page"))


# ============================================================================
# HTML Routes (HTMX-powered)
# ============================================================================

def _board_context(auth: AuthContext) -> Dict[str, Any]:
    board = _filtered_board()
    return {
        "user": auth.user,
        "jobs": board["filtered"],
        "total_count": len(board["jobs"]),
        "criteria": board["criteria"],
        "job_type_options": JOB_TYPE_OPTIONS,
        "experience_options": EXPERIENCE_LEVEL_OPTIONS,
    }


@app.route("/")
@login_required
def index(auth: AuthContext):
    """Render the job board page."""
    return render_template("index.html", **_board_context(auth))


@app.route("/partials/job-cards", methods=["GET"])
@login_required
def job_cards_partial(auth: AuthContext):
    """
    HTMX partial: Return only the results count and job cards.

    Fired on every search/filter input change; recomputes the full filter.
    """
    context = _board_context(auth)
    response = make_response(render_template("partials/job_cards.html", **context))
    # Keep the address bar on the board page with the active filters
    response.headers["HX-Push-Url"] = url_for("index", **context["criteria"].to_query_params())
    return response


@app.route("/partials/job-detail/<job_id>", methods=["GET"])
@login_required
def job_detail_partial(job_id: str, auth: AuthContext):
    """HTMX partial: detail view rendered inside the board's modal."""
    return render_template("partials/job_detail.html", job=_load_job(job_id))


@app.route("/job/<job_id>")
@login_required
def job_detail(job_id: str, auth: AuthContext):
    """Render the job detail page."""
    return render_template("job_detail.html", job=_load_job(job_id), user=auth.user)


@app.route("/job/<job_id>/apply")
@login_required
def apply_to_job(job_id: str, auth: AuthContext):
    """
    Perform the apply action for a job.

    Email applications redirect to a mailto: URI, external applications to
    the posting's careers page. Jobs without a usable contact fall back to
    the detail page with a notice.
    """
    job = _load_job(job_id)
    action = resolve_application_action(job)
    log = _request_logger("apply")

    if isinstance(action, ComposeEmail):
        log.info(f"Apply by email: job={job.id} user={auth.user.id}")
        return redirect(action.mailto_uri())
    if isinstance(action, OpenExternal):
        log.info(f"Apply externally: job={job.id} user={auth.user.id}")
        return redirect(action.url)

    log.info(f"No apply action for job {job.id}: {action.reason}")
    flash("This posting has no application contact yet.", "warning")
    return redirect(url_for("job_detail", job_id=job.id))


@app.route("/post-job", methods=["GET", "POST"])
@login_required
def post_job(auth: AuthContext):
    """Render and handle the post-a-job form."""
    if request.method == "GET":
        return render_template("post_job.html", user=auth.user, form={}, errors={},
                               job_type_options=JOB_TYPE_OPTIONS[1:],
                               experience_options=EXPERIENCE_LEVEL_OPTIONS[1:])

    form = request.form.to_dict()
    try:
        draft = parse_job_form(form)
    except FormValidationError as e:
        return render_template("post_job.html", user=auth.user, form=form, errors=e.field_errors,
                               job_type_options=JOB_TYPE_OPTIONS[1:],
                               experience_options=EXPERIENCE_LEVEL_OPTIONS[1:]), 400

    job = _get_repo().create(draft, user_id=auth.user.id)
    flash(f"Job posted: {job.title} at {job.company}", "success")
    return redirect(url_for("index"))


# ============================================================================
# Application Entry Point
# ============================================================================

if __name__ == "__main__":
    port = settings.flask_port
    debug = settings.flask_debug

    logger.info(f"Starting Job Board UI on http://localhost:{port}")
    app.run(host="0.0.0.0", port=port, debug=debug)
