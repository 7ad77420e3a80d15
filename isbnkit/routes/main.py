from flask import Blueprint, current_app, jsonify, make_response

from isbnkit.utils.messages import (
    ERROR_UNSUPPORTED_LANGUAGE, INFO_LANGUAGE_CHANGED_EN, INFO_LANGUAGE_CHANGED_PL
)

bp = Blueprint("main", __name__)


@bp.route('/set_language/<lang>')
def set_language(lang):
    if lang in current_app.config['LANGUAGES']:
        message = INFO_LANGUAGE_CHANGED_PL if lang == 'pl' else INFO_LANGUAGE_CHANGED_EN
        response = make_response(jsonify({'success': True, 'language': lang, 'message': message}))

        # Set cookie for 2 years with explicit path
        response.set_cookie('language', lang, max_age=60*60*24*365*2, path='/')

        return response
    return jsonify({'success': False, 'error': str(ERROR_UNSUPPORTED_LANGUAGE)}), 400
