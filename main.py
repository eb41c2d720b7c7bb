# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "click>=8.1",
#     "httpx>=0.27",
#     "python-dotenv>=1.2.1",
#     "pyyaml>=6.0",
#     "rich>=13.7",
# ]
# ///
# just run `uv run main.py [workspace] <status>`
from slackstatus.app import run


if __name__ == "__main__":
    run()
