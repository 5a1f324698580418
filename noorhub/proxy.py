#!/usr/bin/env python3
"""
AI backend proxy.

Accepts ``{action, payload, config}`` on ``POST /api`` and answers with
``{text}`` or ``{error, details}``. The generative model is reached through
the OpenAI chat completions API; ``config`` carries the system instruction,
temperature and an optional JSON schema for structured answers.

Usage:
    python -m noorhub.proxy
"""
import json
import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from openai import OpenAI, OpenAIError

from . import config

log = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)

ARRAY_WRAPPER_KEY = "items"

_client = None


def get_client():
    """Lazily create the OpenAI client from the configured key"""
    global _client
    if _client is None:
        _client = OpenAI(api_key=config.OPENAI_API_KEY)
    return _client


def _response_format(action, schema):
    """OpenAI wants an object at the root, so array schemas get wrapped"""
    if schema.get("type") == "array":
        schema = {
            "type": "object",
            "properties": {ARRAY_WRAPPER_KEY: schema},
            "required": [ARRAY_WRAPPER_KEY],
        }
    return {
        "type": "json_schema",
        "json_schema": {
            "name": action or "response",
            "schema": schema,
            "strict": False,
        },
    }


def _unwrap(text, schema):
    if schema.get("type") != "array":
        return text
    data = json.loads(text)
    if isinstance(data, dict) and ARRAY_WRAPPER_KEY in data:
        return json.dumps(data[ARRAY_WRAPPER_KEY], ensure_ascii=False)
    return text


def generate(action, payload, options, client=None):
    """Run one completion and return the model's text"""
    client = client or get_client()
    options = options or {}
    user_content = payload if isinstance(payload, str) else json.dumps(payload, ensure_ascii=False)

    messages = []
    if options.get("systemInstruction"):
        messages.append({"role": "system", "content": options["systemInstruction"]})
    messages.append({"role": "user", "content": user_content})

    kwargs = {"model": config.OPENAI_MODEL, "messages": messages}
    if options.get("temperature") is not None:
        kwargs["temperature"] = options["temperature"]
    schema = options.get("responseSchema")
    if schema:
        kwargs["response_format"] = _response_format(action, schema)

    response = client.chat.completions.create(**kwargs)
    text = response.choices[0].message.content or ""
    if schema:
        text = _unwrap(text, schema)
    return text


@app.route('/api', methods=['POST', 'OPTIONS'])
def api():
    if request.method == 'OPTIONS':
        return '', 204

    if not config.OPENAI_API_KEY:
        return jsonify({'error': 'OPENAI_API_KEY is missing in the server environment.'}), 500

    if not request.is_json:
        return jsonify({'error': 'JSON required'}), 400

    data = request.get_json(silent=True) or {}
    action = data.get('action')
    payload = data.get('payload')
    if not payload:
        return jsonify({'error': 'No payload provided'}), 400

    try:
        text = generate(action, payload, data.get('config'))
    except (OpenAIError, ValueError) as e:
        log.error("AI backend error for action %s: %s", action, e)
        return jsonify({
            'error': str(e) or 'An error occurred during AI processing.',
            'details': repr(e),
        }), 500

    return jsonify({'text': text})


if __name__ == '__main__':
    config.configure_logging()
    log.info("AI proxy ready on http://0.0.0.0:8787/api")
    app.run(host='0.0.0.0', port=8787, debug=False)
