"""
Manual smoke check against a running server (python main.py).
Not collected by pytest; run it directly.
"""
import os

import requests
from dotenv import load_dotenv

load_dotenv()

# --- CONFIGURATION ---
PORT = os.getenv("PORT", "3030")
BASE_URL = f"http://127.0.0.1:{PORT}"
KEY = "smoke-test"  # Change this key to start a fresh count


def main():
    for fill_mode in (None, "milestone", "RANDOM"):
        params = {"fill_mode": fill_mode} if fill_mode else {}
        response = requests.get(f"{BASE_URL}/{KEY}", params=params, timeout=5)
        print(f"fill_mode={fill_mode!s:<9} status={response.status_code} "
              f"type={response.headers.get('Content-Type')}")
        print(f"  cache-control: {response.headers.get('Cache-Control')}")

    stats = requests.get(f"{BASE_URL}/stats", timeout=5).json()
    print(f"Stats: {stats}")


if __name__ == "__main__":
    try:
        main()
    except requests.RequestException as e:
        print(f"Error: {e}")
