"""Flask web application for fleet maintenance requests."""

import asyncio
import logging

import yaml
from flask import Flask, render_template, request, redirect, url_for, flash

import config
from models import (
    LoadStatus,
    MaintenanceRequestWorkflow,
    SubmitStatus,
    load_fleet,
)
from services import make_backend
from services.yaml_store import fleet_path, list_fleet_ids

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = config.SECRET_KEY
app.config["FLEET_DIR"] = config.FLEET_DIR
app.config["POCKETBASE_URL"] = config.POCKETBASE_URL
app.config["POCKETBASE_TIMEOUT"] = config.POCKETBASE_TIMEOUT

SUCCESS_MESSAGE = "Maintenance request submitted successfully"


def make_workflow(on_completed=None) -> MaintenanceRequestWorkflow:
    """Build a workflow for the configured backend."""
    catalog, request_service = make_backend(
        app.config["FLEET_DIR"],
        app.config["POCKETBASE_URL"],
        timeout=app.config["POCKETBASE_TIMEOUT"],
    )
    return MaintenanceRequestWorkflow(catalog, request_service, on_completed)


def load_status_name(status: LoadStatus) -> str:
    """Template-friendly name for a load status."""
    return status.name.lower()


app.jinja_env.filters["load_status_name"] = load_status_name


@app.route("/")
def index():
    """Dashboard showing all trucks."""
    fleets = []
    for fleet_id in list_fleet_ids(app.config["FLEET_DIR"]):
        try:
            fleet = load_fleet(fleet_path(app.config["FLEET_DIR"], fleet_id))
        except (OSError, yaml.YAMLError, KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping unreadable fleet file %s: %s", fleet_id, e)
            fleets.append({"id": fleet_id, "error": True})
            continue
        pending = sum(1 for r in fleet.requests if r.status == "pending")
        fleets.append({
            "id": fleet_id,
            "fleet": fleet,
            "total_tasks": len(fleet.tasks),
            "pending": pending,
        })

    return render_template("index.html", fleets=fleets)


@app.route("/fleet/<fleet_id>/request", methods=["GET"])
def request_form(fleet_id: str):
    """New maintenance request form."""
    workflow = make_workflow()
    asyncio.run(workflow.initialize(fleet_id))

    return render_template(
        "request_form.html",
        fleet_id=fleet_id,
        view=workflow.get_view_state(),
        LoadStatus=LoadStatus,
    )


@app.route("/fleet/<fleet_id>/request", methods=["POST"])
def submit_request(fleet_id: str):
    """Handle new maintenance request form submission."""
    completed = []
    workflow = make_workflow(on_completed=completed.append)
    task_id = request.form.get("task_id") or None

    async def run():
        await workflow.initialize(fleet_id)
        if task_id is not None and not workflow.select_task(task_id):
            return None
        return await workflow.submit()

    state = asyncio.run(run())

    if workflow.get_view_state().load.status != LoadStatus.LOADED:
        message = workflow.get_view_state().load.message
        flash(message or "No maintenance tasks defined for this truck", "error")
        return redirect(url_for("request_form", fleet_id=fleet_id))

    if state is None:
        flash("Please select a maintenance task", "error")
        return redirect(url_for("request_form", fleet_id=fleet_id))

    if state.status == SubmitStatus.SUCCEEDED and completed:
        flash(SUCCESS_MESSAGE, "success")
        return redirect(url_for("index"))

    flash(state.message or "Failed to submit maintenance request", "error")
    return redirect(url_for("request_form", fleet_id=fleet_id))


if __name__ == "__main__":
    # Run with debug mode for development
    # Using 5001 to avoid conflict with macOS AirPlay Receiver on 5000
    app.run(debug=True, host="0.0.0.0", port=5001)
