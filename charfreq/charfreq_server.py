import os
import sys
import threading
from uuid import uuid4

from flask import Flask, Response, jsonify, request
from werkzeug.utils import secure_filename
from watchdog.observers import Observer

import charfreq_helper as charfreq_helper
from charfreq_file_observer import IngestFileHandler, PART_SUFFIX
from charfreq_helper import DEFAULT_CHUNK_SIZE, get_current_timestamp, log
from histogram_store import HistogramStore

# some global variables:
observer = Observer()
app = Flask(__name__)
app.config['UPLOAD_FOLDER'] = os.getcwd() + "/uploads/"
app.config['CHUNK_SIZE'] = DEFAULT_CHUNK_SIZE

# shared by the flask threads and the observer thread
store = HistogramStore()


@app.route('/charfreq/add', methods=['POST'])
def add_text():
    # accepts either a raw text body or json data like:
    # {
    # "text": "some text to count",
    # }
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get("text"), str):
            return "no text in request", 400
        text = data["text"]
    else:
        text = request.get_data(as_text=True)

    total = store.add(text)
    log("/charfreq/add", f"{len(text)} characters added at {get_current_timestamp()}")
    return jsonify(total_letters=total), 200


# for uploading text files, the observer counts them once they are complete
@app.route('/charfreq/upload', methods=['POST'])
def upload_file():
    if 'file' not in request.files:
        return "no file in request", 400

    file = request.files['file']
    if file.filename == '':
        return 'no file_name in request', 400

    filename = secure_filename(file.filename)
    if not filename or filename.endswith(PART_SUFFIX):
        return f"invalid file_name '{file.filename}'", 400

    # unique per upload, so two uploads of the same name never share a path
    stored_name = f"{uuid4().hex}_{filename}"
    # written under a temporary name first, the rename tells the observer the file is complete
    final_path = os.path.join(app.config['UPLOAD_FOLDER'], stored_name)
    part_path = final_path + PART_SUFFIX
    file.save(part_path)
    os.replace(part_path, final_path)
    log("/charfreq/upload", f"file \"{filename}\" stored as \"{stored_name}\" at {get_current_timestamp()}")
    return 'file successfully uploaded!', 200


@app.route('/charfreq/report', methods=['GET'])
def report():
    return Response(store.format(), mimetype='text/plain')


@app.route('/charfreq/stats', methods=['GET'])
def stats():
    return jsonify(store.stats()), 200


@app.route('/charfreq/reset', methods=['POST'])
def reset():
    store.reset()
    log("/charfreq/reset", f"histogram reset at {get_current_timestamp()}")
    return "histogram reset", 200


# for the file observer
def run_observer():
    path = app.config['UPLOAD_FOLDER']
    log("server", f"observing files in: {path}")
    event_handler = IngestFileHandler(store, app.config['CHUNK_SIZE'])
    observer.schedule(event_handler, path, recursive=False)
    observer.start()


def main(argv=None):
    # first argument:  hostname to listen on
    # second argument: port to listen on
    # third argument:  folder for uploaded text files
    if argv is None:
        argv = sys.argv[1:]

    needed_arguments = "needed arguments: hostname port upload_folder"
    if len(argv) != 3:
        print(needed_arguments)
        return 1
    hostname_to_listen = argv[0]
    try:
        port_to_listen = int(argv[1])
    except ValueError:
        print(f"[server] port has to be a number, got \"{argv[1]}\"")
        print(needed_arguments)
        return 1
    app.config['UPLOAD_FOLDER'] = os.path.abspath(argv[2])

    # first check wether the directory already exists, if not create it
    os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

    # run the file observer part
    t = threading.Thread(target=run_observer)
    t.start()

    # run server for text and upload handling
    app.run(host=hostname_to_listen, port=port_to_listen, debug=False)
    log("server", "flask server ended...")

    # at the end, close the other threads
    charfreq_helper.close_thread(t, "observer helper")
    charfreq_helper.close_thread(observer, "observer")
    return 0


###########################################################################
# START
###########################################################################
if __name__ == "__main__":
    sys.exit(main())
