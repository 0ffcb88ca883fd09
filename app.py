"""Development entrypoint delegating to the application package."""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from askdoc.main import app


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "3001")), debug=True)
