from flask import Flask, render_template, request, redirect, url_for, jsonify
from catalog import (
    ALL_NEIGHBORHOODS,
    all_destinations,
    detail_region,
    filter_by_neighborhood,
    map_pins,
    neighborhoods,
    overview_region,
    search_destinations,
)
from api import api
import os

app = Flask(__name__)
app.config.from_mapping(
    LOG_LEVEL='INFO',
    MAP_TILE_URL='https://tile.openstreetmap.org/{z}/{x}/{y}.png',
)
# EXPLORE_LOG_LEVEL, EXPLORE_MAP_TILE_URL, ... override the defaults
app.config.from_prefixed_env('EXPLORE')
app.logger.setLevel(app.config['LOG_LEVEL'])


def log_catalog_summary():
    app.logger.info("Loaded %d destinations across %s", len(all_destinations()), ', '.join(neighborhoods()[1:]))


log_catalog_summary()


@app.route('/')
def home():
    return redirect(url_for('destinations_index'))


@app.route('/search', methods=['GET'])
def search():
    query = request.args.get('query')
    return jsonify([destination.to_dict() for destination in search_destinations(query)])


@app.route('/destinations')
def destinations_index():
    selected = request.args.get('neighborhood') or ALL_NEIGHBORHOODS
    choices = neighborhoods()
    if selected not in choices:
        app.logger.debug("No destinations for neighborhood %r", selected)

    dataset = all_destinations()
    filtered = filter_by_neighborhood(selected)
    # Detail links use the position in the full dataset, not in the filtered list
    items = [(dataset.index(destination), destination) for destination in filtered]

    return render_template('destinations.html',
                           items=items,
                           neighborhoods=choices,
                           selected=selected,
                           region=overview_region(),
                           pins=map_pins(filtered))


@app.route('/destinations/<int:destination_id>')
def destination_details(destination_id):
    dataset = all_destinations()
    if destination_id < 0 or destination_id >= len(dataset):
        app.logger.warning("Destination %d requested, only %d available", destination_id, len(dataset))
        return "Destination not found", 404
    destination = dataset[destination_id]
    return render_template('destination.html',
                           destination=destination,
                           region=detail_region(destination),
                           pins=map_pins([destination]))


app.register_blueprint(api, url_prefix='/api')

if __name__ == '__main__':
    app.run(host="0.0.0.0", port=int(os.environ.get('PORT', 8093)))
