"""Local development entrypoint.

Exposes `app` for tools that look for one in `main.py`.
"""

from lottonews import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=3000, debug=False)
