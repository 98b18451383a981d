import os
import sys

import requests

GET_MODES = ("report", "stats")
POST_MODES = ("add", "upload", "reset")


def send(mode, server_url, file_path=None):
    """Sends one request to the charfreq server and returns the response"""
    url = f"{server_url.rstrip('/')}/charfreq/{mode}"
    if mode in GET_MODES:
        return requests.get(url)
    if mode == "add":
        with open(file_path, encoding="utf-8") as f:
            return requests.post(url, json={"text": f.read()})
    if mode == "upload":
        with open(file_path, 'rb') as f:
            files = {'file': (os.path.basename(file_path), f)}
            return requests.post(url, files=files)
    return requests.post(url)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    needed_arguments = "needed arguments: [add|upload|report|stats|reset] server_url [file ...]"
    if len(argv) < 2 or argv[0] not in GET_MODES + POST_MODES:
        print(needed_arguments)
        return 1
    mode = argv[0]
    server_url = argv[1]
    file_paths = argv[2:]
    if mode in ("add", "upload") and not file_paths:
        print(f"[client] mode \"{mode}\" needs at least one file")
        print(needed_arguments)
        return 1

    failed = False
    for file_path in file_paths or [None]:
        try:
            response = send(mode, server_url, file_path)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            print(f"[client] error: {e}", flush=True)
            failed = True
            continue
        except (OSError, UnicodeDecodeError) as e:
            print(f"[client] could not read {file_path}: {e}", flush=True)
            failed = True
            continue
        print(response.status_code)
        print(response.text)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
