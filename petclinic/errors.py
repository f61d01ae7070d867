import logging

from flask import render_template

logger = logging.getLogger(__name__)


class OwnerNotFound(ValueError):
    """Raised when an owner id does not resolve to a stored owner."""

    def __init__(self, owner_id):
        self.owner_id = owner_id
        super().__init__(
            f"Owner not found with id: {owner_id}. Please ensure the ID is "
            "correct and the owner exists in the database."
        )


def register_error_handlers(app) -> None:
    @app.errorhandler(OwnerNotFound)
    def handle_owner_not_found(exc):
        logger.warning("%s", exc)
        return render_template("error.html", status=404, message=str(exc)), 404

    @app.errorhandler(404)
    def handle_not_found(_exc):
        return (
            render_template(
                "error.html", status=404, message="The requested page does not exist."
            ),
            404,
        )

    @app.errorhandler(500)
    def handle_server_error(_exc):
        return (
            render_template("error.html", status=500, message="Something happened..."),
            500,
        )
