from flask import Flask, abort, flash, jsonify, redirect, render_template, request, url_for
import json
import logging
from typing import Iterable, Union

from console import config
from console.dispatcher import ResourceDispatcher
from console.resources import RESOURCE_SPECS, ResourceType
from console.state import Notification
from shared.debug_api_client import DebugApiClient

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = config.SECRET_KEY
app.config["NOTIFICATION_TTL_MS"] = config.NOTIFICATION_TTL_MS

# Shared by every request; replace it to point the console at another backend.
dispatcher = ResourceDispatcher(DebugApiClient(config.API_BASE_URL, timeout=config.REQUEST_TIMEOUT))
logger.info("Debug console bound to API %s", dispatcher.client.base_url)


def resolve_resource(name: str) -> ResourceType:
    try:
        return ResourceType(name)
    except ValueError:
        abort(404)


def flash_notifications(notes: Union[None, Notification, Iterable[Notification]]):
    if notes is None:
        return
    if isinstance(notes, Notification):
        notes = [notes]
    for note in notes:
        flash(note.message, note.category)


def confirmed_by_form(_prompt: str) -> bool:
    # The browser shows the prompt; the form carries the operator's answer.
    return request.form.get("confirmed", "").lower() == "yes"


@app.template_filter('display_value')
def display_value(value) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


@app.route('/')
def index():
    if not dispatcher.state.loaded_once:
        flash_notifications(dispatcher.load_all())

    state = dispatcher.state
    cards = []
    for resource, spec in RESOURCE_SPECS.items():
        records = state.records(resource)
        cards.append({
            "spec": spec,
            "records": records,
            "rows": [record.as_row() for record in records],
            "loading": state.is_loading(resource),
            "draft": state.draft(resource),
        })
    return render_template(
        'dashboard.html',
        cards=cards,
        api_base_url=dispatcher.client.base_url,
        notification_ttl_ms=app.config["NOTIFICATION_TTL_MS"],
    )


@app.route('/<resource>/create', methods=['POST'])
def resource_create(resource):
    resource_type = resolve_resource(resource)
    dispatcher.update_draft_from_form(resource_type, request.form)
    flash_notifications(dispatcher.create(resource_type))
    return redirect(url_for('index'))


@app.route('/<resource>/delete', methods=['POST'])
def resource_delete(resource):
    resource_type = resolve_resource(resource)
    flash_notifications(dispatcher.delete_all(resource_type, confirmed_by_form))
    return redirect(url_for('index'))


@app.route('/<resource>/refresh', methods=['POST'])
def resource_refresh(resource):
    resource_type = resolve_resource(resource)
    flash_notifications(dispatcher.list(resource_type))
    return redirect(url_for('index'))


@app.route('/<resource>/clear', methods=['POST'])
def resource_clear(resource):
    resource_type = resolve_resource(resource)
    dispatcher.clear_draft(resource_type)
    return redirect(url_for('index'))


@app.route('/seed', methods=['POST'])
def seed():
    flash_notifications(dispatcher.seed(confirmed_by_form))
    return redirect(url_for('index'))


@app.route('/reset', methods=['POST'])
def reset():
    flash_notifications(dispatcher.reset(confirmed_by_form))
    return redirect(url_for('index'))


@app.route('/api/state')
def api_state():
    return jsonify({
        "api_base_url": dispatcher.client.base_url,
        "loaded": dispatcher.state.loaded_once,
        "resources": dispatcher.state.snapshot(),
    })
