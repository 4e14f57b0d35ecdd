import logging

from flask import Flask, jsonify, request

from passgen import __version__
from passgen.batch import generate_batch
from passgen.charsets import CharClass
from passgen.errors import InvalidArgument, PassgenError
from passgen.evaluator import check_password_strength, score_password
from passgen.formats import format_password, generate_hash
from passgen.passphrase import generate_passphrase
from passgen.policy import Policy, validate

logger = logging.getLogger(__name__)

app = Flask(__name__)

# request keys -> class, as in the CLI flags
_CLASS_KEYS = (
    ("uppercase", CharClass.UPPER),
    ("lowercase", CharClass.LOWER),
    ("numbers", CharClass.DIGIT),
    ("special", CharClass.SYMBOL),
)


def _int(data, key, default):
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"'{key}' must be an integer")
    return value


@app.errorhandler(PassgenError)
def handle_passgen_error(e):
    return jsonify({"error": str(e), "category": e.category}), 400


@app.route('/')
def home():
    return jsonify({"message": "passgen API is running", "version": __version__})


@app.route('/api/generate', methods=['POST'])
def generate_route():
    data = request.get_json(silent=True) or {}
    selected = [cls for key, cls in _CLASS_KEYS if data.get(key)]
    if not selected:
        selected = [cls for _, cls in _CLASS_KEYS]
    minimum = 1 if data.get('force_each', True) else 0
    policy = Policy(
        length=_int(data, 'length', 16),
        classes={cls: minimum for cls in selected},
        exclude=frozenset(data.get('exclude') or ""),
        avoid_ambiguous=bool(data.get('exclude_similar', False)),
        avoid_lookalike_symbols=bool(data.get('exclude_ambiguous', False)),
    )
    validated = validate(policy)
    count = _int(data, 'count', 1)
    results = generate_batch(validated, count, unique=bool(data.get('unique', False)))
    logger.info("api: generated %d password(s), pool size %d", count, validated.pool_size)
    fmt = data.get('format', 'plain')
    passwords = [
        {
            'password': r.password,
            'formatted_password': format_password(r.password, fmt),
            'length': len(r.password),
            'entropy': r.strength,
        }
        for r in results
    ]
    if count == 1:
        return jsonify(passwords[0])
    return jsonify({'passwords': passwords})


@app.route('/api/passphrase', methods=['POST'])
def passphrase_route():
    data = request.get_json(silent=True) or {}
    words = _int(data, 'words', 4)
    passphrase = generate_passphrase(
        words,
        data.get('separator', ' '),
        bool(data.get('numbers', False)),
        bool(data.get('special', False)),
    )
    return jsonify({'passphrase': passphrase, 'words': words, 'length': len(passphrase)})


@app.route('/api/check', methods=['POST'])
def check_route():
    data = request.get_json(silent=True) or {}
    password = data.get('password', '')
    result = score_password(password)
    return jsonify({
        'password': password,
        'length': result['length'],
        'entropy': result['entropy'],
        'strength': check_password_strength(password),
        'label': result['label'],
        'score': result['score'],
        'explanations': result['explanations'],
        'analysis': [{'criterion': c, 'status': ok} for c, ok in result['analysis']],
    })


@app.route('/api/hash', methods=['POST'])
def hash_route():
    data = request.get_json(silent=True) or {}
    text = data.get('input', '')
    algorithm = data.get('algorithm', 'sha256')
    return jsonify({'input': text, 'algorithm': algorithm, 'hash': generate_hash(text, algorithm)})


if __name__ == "__main__":
    app.run(debug=True)
