"""
Newsletter routes for sign-up forms and stats.
"""
from flask import Blueprint, jsonify, redirect, request
from .models import SubscribeStatus
from .services import NewsletterService


def create_newsletter_routes(newsletter_service: NewsletterService, return_path: str = "/blog") -> Blueprint:
    """Create newsletter routes blueprint."""
    bp = Blueprint('newsletter', __name__, url_prefix='/api/newsletter')

    @bp.route('/subscribe', methods=['POST'])
    def subscribe():
        """
        Sign up for the newsletter.

        Accepts JSON ({"email", "source"}) from scripts and plain form posts
        from the blog page. Form posts are redirected back to the page.
        """
        if request.is_json:
            payload = request.get_json(silent=True)
            if not isinstance(payload, dict):
                payload = {}
            result = newsletter_service.subscribe(payload.get("email"), payload.get("source"))
            if not result.ok:
                return jsonify(result.to_dict()), 400
            status_code = 201 if result.status == SubscribeStatus.SUBSCRIBED else 200
            return jsonify(result.to_dict()), status_code

        result = newsletter_service.subscribe(request.form.get("email"), request.form.get("source"))
        state = "ok" if result.ok else "invalid"
        return redirect(f"{return_path}?subscribed={state}#newsletter")

    @bp.route('/stats', methods=['GET'])
    def stats():
        """Get subscription totals."""
        return jsonify(newsletter_service.get_stats())

    return bp
