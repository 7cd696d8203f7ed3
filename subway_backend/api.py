from flask import request, jsonify, Response
from werkzeug.exceptions import BadRequest
from subway_backend.app import app
import subway_backend.database as db
import subway_backend.lines as lines


def get_database_path():
    return app.config["DATABASE_PATH"]


def get_json_body():
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise BadRequest("Request body must be a JSON object.")
    return body


def get_text_field(body, key):
    value = body.get(key)
    if not isinstance(value, str) or not value.strip():
        raise BadRequest(key + " must be a non-empty string.")
    return value


def get_int_field(body, key):
    value = body.get(key)
    # JSON true/false arrive as bool, which is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise BadRequest(key + " must be an integer.")
    return value


def get_id_field(body, key):
    value = get_int_field(body, key)
    if not 0 < value <= db.MAX_SQLITE_INTEGER:
        raise BadRequest(key + " is not a valid id.")
    return value


def get_id_arg(key):
    value = request.args.get(key, type=int)
    if value is None or not 0 < value <= db.MAX_SQLITE_INTEGER:
        raise BadRequest(key + " must be a valid id.")
    return value


def generate_response(result_set):
    accept_headers = request.headers.get("Accept", "").split(",")

    if "text/csv" in accept_headers:
        return Response(result_set.to_csv(index=False), mimetype="text/csv")
    elif "text/html" in accept_headers:
        return Response(result_set.to_html(index=False), mimetype="text/html")
    else:
        return jsonify(
            {"response": "OK", "return_value": result_set.to_dict(orient="records")}
        )


@app.route("/lines", methods=["POST"])
def create_line():
    body = get_json_body()
    line = lines.create_line(
        get_database_path(),
        get_text_field(body, "name"),
        get_text_field(body, "color"),
        get_id_field(body, "upStationId"),
        get_id_field(body, "downStationId"),
        get_int_field(body, "distance"),
    )

    response = jsonify({"response": "OK", "return_value": line.to_dict()})
    response.headers["Location"] = "/lines/" + str(line.get_id())
    return response, 201


@app.route("/lines", methods=["GET"])
def get_lines():
    return_value = [line.to_dict() for line in lines.find_all_lines(get_database_path())]

    return jsonify({"response": "OK", "return_value": return_value})


@app.route("/lines/<int:line_id>", methods=["GET"])
def get_line(line_id):
    line = lines.find_line(get_database_path(), line_id)

    return jsonify({"response": "OK", "return_value": line.to_dict()})


@app.route("/lines/<int:line_id>", methods=["PUT"])
def update_line(line_id):
    body = get_json_body()
    lines.rename(
        get_database_path(),
        line_id,
        get_text_field(body, "name"),
        get_text_field(body, "color"),
    )

    return jsonify({"response": "OK", "message": "Changes applied"})


@app.route("/lines/<int:line_id>", methods=["DELETE"])
def delete_line(line_id):
    lines.delete_line(get_database_path(), line_id)

    return "", 204


@app.route("/lines/<int:line_id>/sections", methods=["POST"])
def create_section(line_id):
    body = get_json_body()
    section = lines.add_section(
        get_database_path(),
        line_id,
        get_id_field(body, "upStationId"),
        get_id_field(body, "downStationId"),
        get_int_field(body, "distance"),
    )

    response = jsonify({"response": "OK", "return_value": section.to_dict()})
    response.headers["Location"] = "/lines/" + str(line_id) + "/sections"
    return response, 201


@app.route("/lines/<int:line_id>/sections", methods=["DELETE"])
def delete_section(line_id):
    station_id = get_id_arg("stationId")
    lines.remove_station(get_database_path(), line_id, station_id)

    return "", 204


# Used to list or export the sections of one line:
@app.route("/lines/<int:line_id>/sections", methods=["GET"])
def get_sections(line_id):
    result_set = db.get_sections_frame(get_database_path(), line_id)

    return generate_response(result_set)


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(app.config["PORT"]))
