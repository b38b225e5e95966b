import os
import sys
import json
import requests

BASE_URL = os.environ.get("SMOKE_URL") or os.environ.get("DEV_URL", "http://127.0.0.1:3000")
API = f"{BASE_URL.rstrip('/')}/api"


def get(path: str, params: dict | None = None, expect_ok: bool = True):
    r = requests.get(f"{API}{path}", params=params, timeout=10)
    if expect_ok:
        r.raise_for_status()
    return r


def main():
    print(f"[smoke] Target: {API}")
    print("[smoke] /health/live:", get("/health/live").status_code)
    print("[smoke] /health/ready:", get("/health/ready").status_code)
    print("[smoke] /version:", get("/version").status_code)

    first = get("/lawsuits", {"limit": 2}).json()
    print("[smoke] /lawsuits:", json.dumps(first, indent=2, ensure_ascii=False)[:300])

    if first.get("nextCursor"):
        nxt = get("/lawsuits", {"limit": 2, "cursor": first["nextCursor"]}).json()
        print("[smoke] /lawsuits (page 2):", len(nxt.get("items", [])), "items")

    if first.get("items"):
        numero = first["items"][0]["numeroProcesso"]
        detail = get(f"/lawsuits/{numero}").json()
        print("[smoke] /lawsuits/<numero>:", detail.get("tramitacaoAtual", {}).get("grau"))

    missing = get("/lawsuits/0000000-00.0000.0.00.0000", expect_ok=False)
    if missing.status_code != 404:
        raise RuntimeError(f"expected 404 for unknown lawsuit, got {missing.status_code}")
    print("[smoke] unknown lawsuit -> 404", missing.json().get("code"))


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print("[smoke] FAILED:", e)
        sys.exit(1)
