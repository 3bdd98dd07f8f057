"""
Portfolio Routes - Presentation data for the frontend
Handles: Static site content, computed scroll frames
"""

import math
from flask import jsonify, request, current_app, abort
from presentation import PresentationController, letters_for
from . import portfolio_bp


def _non_negative_arg(name, default):
    raw = request.args.get(name)
    if raw is None or raw == '':
        return default
    try:
        value = float(raw)
    except ValueError:
        abort(400, description=f'{name} must be a number')
    if not math.isfinite(value) or value < 0:
        abort(400, description=f'{name} must be a non-negative number')
    return value


@portfolio_bp.route('/site')
def site_content():
    """Static content the welcome section renders"""
    config = current_app.config
    owner = config.get('SITE_OWNER_NAME', '')
    first_name = owner.split()[0] if owner else ''
    return jsonify({
        'owner': owner,
        'letters': [letter.letter for letter in letters_for(first_name)],
        'typewriterTexts': list(config.get('TYPEWRITER_TEXTS', [])),
        'socialLinks': list(config.get('SOCIAL_LINKS', [])),
        'videos': dict(config.get('WELCOME_VIDEOS', {})),
        'thresholds': {
            'hideWelcome': config.get('HIDE_WELCOME'),
            'scrolled': config.get('SCROLLED_OFFSET'),
            'sections': dict(config.get('SECTION_REVEAL_OFFSETS', {})),
        },
    })


@portfolio_bp.route('/frame')
def presentation_frame():
    """Presentation parameters for one scroll offset and viewport width"""
    scroll_y = _non_negative_arg('scrollY', 0.0)
    width = _non_negative_arg('width', 1280.0)

    controller = PresentationController.from_config(current_app.config, width=width)
    frame = controller.on_scroll(scroll_y)
    return jsonify(frame.to_dict())
