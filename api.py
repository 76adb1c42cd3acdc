from flask import Blueprint, request, jsonify, current_app

from catalog import ALL_NEIGHBORHOODS, filter_by_neighborhood, find_destination, neighborhoods

api = Blueprint('api', __name__)


@api.route('/destinations')
def destinations():
    selected = request.args.get('neighborhood') or ALL_NEIGHBORHOODS
    results = filter_by_neighborhood(selected)
    return jsonify({
        'neighborhood': selected,
        'count': len(results),
        'destinations': [destination.to_dict() for destination in results]
    })


@api.route('/destinations/<name>')
def destination(name):
    found = find_destination(name)
    if found is None:
        current_app.logger.warning("API lookup for unknown destination %r", name)
        return jsonify({'error': 'Destination not found'}), 404
    return jsonify(found.to_dict())


@api.route('/neighborhoods')
def neighborhood_list():
    return jsonify({'neighborhoods': neighborhoods()})
