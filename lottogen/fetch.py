import os
import time
from datetime import datetime

import requests
from bs4 import BeautifulSoup

BASE_URL = "https://www.dhlottery.co.kr"
RESULTS_PAGE = BASE_URL + "/gameResult.do?method=byWin"
DRAW_URL_TEMPLATE = BASE_URL + "/common.do?method=getLottoNumber&drwNo={drw_no}"
TIMEOUT = 10


def _stamp():
    return datetime.now().strftime('%H:%M:%S')


def detect_latest_draw(session=None) -> int:
    """Read the newest draw number from the draw selector on the results page."""
    http = session or requests
    try:
        response = http.get(RESULTS_PAGE, timeout=TIMEOUT)
    except requests.RequestException as e:
        raise SystemExit(f"Failed to fetch results page: {e}")
    if response.status_code != 200:
        raise SystemExit(f"Failed to fetch results page: status {response.status_code}")

    soup = BeautifulSoup(response.text, "html.parser")
    latest = None
    for opt in soup.select("select#dwrNoList option"):
        try:
            latest = max(latest or 0, int(opt.get("value", "").strip()))
        except ValueError:
            pass
    if not latest:
        raise SystemExit("Could not determine latest draw number from page.")
    return latest


def fetch_draw(drw_no, session=None):
    """Return [n1..n6, bonus] for one draw, or None if it is not available."""
    http = session or requests
    response = http.get(DRAW_URL_TEMPLATE.format(drw_no=drw_no), timeout=TIMEOUT)
    if response.status_code != 200:
        print(f"{_stamp()} | Draw {drw_no}: Failed ({response.status_code})")
        return None
    try:
        data = response.json()
    except ValueError:
        print(f"{_stamp()} | Draw {drw_no}: response is not JSON")
        return None
    if data.get("returnValue") != "success":
        print(f"{_stamp()} | Draw {drw_no}: No numbers found")
        return None
    try:
        return [int(data[f"drwtNo{i}"]) for i in range(1, 7)] + [int(data["bnusNo"])]
    except (KeyError, TypeError, ValueError) as e:
        print(f"{_stamp()} | Draw {drw_no}: incomplete numbers ({e!r})")
        return None


def fetch_history(path, start=1, end=None, delay=0.2, session=None) -> int:
    """Download draws start..end (oldest first) into ``path``; returns how many were written."""
    if end is None:
        end = detect_latest_draw(session)
        print(f"Latest draw detected: {end}")
    if start < 1 or end < start:
        raise SystemExit(f"Invalid draw range: {start}..{end}")

    total = end - start + 1
    results = []
    start_time = time.time()
    for count, drw_no in enumerate(range(start, end + 1), start=1):
        try:
            nums = fetch_draw(drw_no, session)
        except requests.RequestException as e:
            print(f"{_stamp()} | [{count}/{total}] Draw {drw_no}: {e}")
            nums = None
        if nums:
            results.append(nums)
            elapsed = time.time() - start_time
            eta_min = elapsed / count * (total - count) / 60
            print(f"{_stamp()} | [{count}/{total}] Draw {drw_no} saved: {nums} | ETA: {eta_min:.1f} min")
        if delay:
            time.sleep(delay)  # Don't hammer the server

    if not results:
        print(f"[WARN] No draws fetched; {path} left unchanged.")
        return 0

    tmp = f"{path}.tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        for nums in results:
            f.write(",".join(str(n) for n in nums) + "\n")
    os.replace(tmp, path)

    print(f"Done. Results saved to {path} ({len(results)} draws, oldest -> newest).")
    return len(results)
