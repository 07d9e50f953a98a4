import logging

from flask import Flask, jsonify, request

from .charclass import CharacterClass, GroupMode, parse_classes
from .errors import EmptyPoolError, InvalidConfigurationError
from .evaluator import assess_strength
from .generator import generate, parse_length

logger = logging.getLogger(__name__)

app = Flask(__name__)

# per-class booleans accepted in place of a "classes" list
_CLASS_KEYS = {
    "upper": CharacterClass.UPPER_LETTERS,
    "lower": CharacterClass.LOWER_LETTERS,
    "digits": CharacterClass.NUMBERS,
    "special": CharacterClass.SPECIAL_CHARACTERS,
}


# longest password the API will generate
MAX_LENGTH = 4096


def _flag(data, key, default):
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise InvalidConfigurationError(f"{key} must be true or false")
    return value


def _classes_from(data):
    if "classes" in data:
        return parse_classes(data["classes"])
    return frozenset(cls for key, cls in _CLASS_KEYS.items() if _flag(data, key, True))


def _excluded_from(data):
    excluded = data.get("exclude")
    if excluded is None:
        return ""
    if not isinstance(excluded, str):
        raise InvalidConfigurationError("exclude must be a string")
    return excluded


@app.errorhandler(InvalidConfigurationError)
def invalid_configuration(e):
    return jsonify({"error": "invalid_configuration", "message": str(e)}), 400


@app.errorhandler(EmptyPoolError)
def empty_pool(e):
    return jsonify({"error": "empty_pool", "message": str(e)}), 400


@app.route('/')
def home():
    return jsonify({"message": "PassGen API is running"})


@app.route('/generate', methods=['POST'])
def generate_route():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise InvalidConfigurationError("request body must be a JSON object")
    length = parse_length(data.get('length', 12))
    if length > MAX_LENGTH:
        raise InvalidConfigurationError(f"length must be at most {MAX_LENGTH}")
    try:
        classes = _classes_from(data)
        group_mode = GroupMode(data.get('group_mode', 'replace'))
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(str(e)) from e
    password = generate(
        length=length,
        classes=classes,
        excluded=_excluded_from(data),
        one_per_group=_flag(data, 'one_per_group', False),
        group_mode=group_mode,
    )
    logger.debug("generated password of length %d", len(password))
    return jsonify({'password': password, 'strength': assess_strength(password).to_dict()})


@app.route('/score', methods=['POST'])
def score_route():
    data = request.get_json(silent=True) or {}
    password = data.get('password', '') if isinstance(data, dict) else None
    if not isinstance(password, str):
        return jsonify({"error": "invalid_password", "message": "password must be a string"}), 400
    return jsonify(assess_strength(password).to_dict())


if __name__ == "__main__":
    app.run(debug=True)
