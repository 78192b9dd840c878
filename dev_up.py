# -----------------------------------------------------------------------------
# dev_up.py: Dev launcher for the Greedy Algorithm Visualizer
# Boots the FastAPI trace API (uvicorn) and the Streamlit replay UI, checks
# the sample graph loads, and relays both processes' output until Ctrl+C.
# Health probe always connects via 127.0.0.1 when the API binds 0.0.0.0.
# -----------------------------------------------------------------------------

from __future__ import annotations
import atexit
import os
import sys
import time
import socket
import subprocess
from pathlib import Path

# ---------------------- CONFIG (base defaults) ----------------------
PROJECT_ROOT = Path(__file__).parent.resolve()
API_APP = "api.main:app"
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))
UI_PORT = int(os.getenv("UI_PORT", "8501"))
UI_FILE = PROJECT_ROOT / "ui" / "app.py"
SAMPLE_GRAPH_PATH = os.getenv("SAMPLE_GRAPH_PATH", str(PROJECT_ROOT / "examples" / "sample_graph.yaml"))
PYTHONPATH_APPEND = os.pathsep.join([str(PROJECT_ROOT / "src"), str(PROJECT_ROOT)])

# ---------------------- HELPERS ----------------------
def echo(msg: str): print(f"[dev_up] {msg}", flush=True)
def fail(msg: str, code: int = 1): echo(f"❌ {msg}"); sys.exit(code)

def port_free(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.settimeout(0.5)
        return s.connect_ex((host, port)) != 0

def wait_for_api(url: str, timeout: float = 60.0) -> bool:
    import requests
    deadline = time.time() + timeout
    while time.time() < deadline:
        try:
            if requests.get(url, timeout=2).status_code == 200:
                return True
        except requests.RequestException:
            time.sleep(0.4)
    return False

def check_sample_graph(path: str):
    # Same loader the API uses, so a bad file fails here rather than on first request
    sys.path.insert(0, str(PROJECT_ROOT / "src"))
    from gav.errors import InvalidGraph
    from gav.types import Graph
    if not Path(path).exists():
        fail(f"Sample graph not found: {path}")
    try:
        g = Graph.from_file(path)
    except (InvalidGraph, OSError) as e:
        fail(f"Sample graph invalid:\n{e}")
    echo(f"✅ Sample graph OK ({len(g.nodes)} nodes, {len(g.edges)} edges)")

def require(pkg: str, hint: str):
    try:
        __import__(pkg)
    except ImportError:
        fail(f"{pkg} missing → {hint}")

def spawn(cmd: list[str], env: dict) -> subprocess.Popen:
    echo(f"▶ {' '.join(cmd)}")
    return subprocess.Popen(cmd, cwd=str(PROJECT_ROOT), env=env,
                            stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True)

# ---------------------- MAIN ----------------------
def main():
    echo("🚀 Launching Greedy Algorithm Visualizer...")
    try:
        from dotenv import load_dotenv
        if load_dotenv(PROJECT_ROOT / ".env"):
            echo("Loaded .env file")
    except ImportError:
        pass

    bind_host = os.getenv("API_HOST", API_HOST)
    bind_port = int(os.getenv("API_PORT", API_PORT))
    probe_host = "127.0.0.1" if bind_host in ("0.0.0.0", "0") else bind_host
    os.environ.setdefault("API_URL", f"http://{probe_host}:{bind_port}")

    require("uvicorn", "pip install uvicorn[standard]")
    require("streamlit", "pip install streamlit")
    require("yaml", "pip install PyYAML")
    check_sample_graph(os.getenv("SAMPLE_GRAPH_PATH", SAMPLE_GRAPH_PATH))

    for port in (bind_port, UI_PORT):
        if not port_free(probe_host, port):
            fail(f"Port {port} already in use.")

    env = os.environ.copy()
    env["PYTHONPATH"] = (env.get("PYTHONPATH", "") + os.pathsep + PYTHONPATH_APPEND).strip(os.pathsep)
    procs = {"API": spawn([sys.executable, "-m", "uvicorn", API_APP, "--host", bind_host,
                           "--port", str(bind_port), "--reload"], env)}

    def cleanup():
        for proc in procs.values():
            if proc.poll() is None:
                proc.terminate()
                time.sleep(0.5)
                if proc.poll() is None:
                    proc.kill()
    atexit.register(cleanup)

    echo("⌛ Waiting for API /health ...")
    if not wait_for_api(f"http://{probe_host}:{bind_port}/health"):
        fail("API failed to become ready in time.")
    echo("✅ API ready")

    procs["UI"] = spawn([sys.executable, "-m", "streamlit", "run", str(UI_FILE),
                         "--server.port", str(UI_PORT), "--server.headless", "true"], env)
    echo(f"🌐 UI: http://localhost:{UI_PORT}   📘 API docs: http://localhost:{bind_port}/docs")

    try:
        while all(p.poll() is None for p in procs.values()):
            for name, proc in procs.items():
                line = proc.stdout.readline() if proc.stdout else ""
                if line:
                    print(f"[{name}] {line}", end="")
            time.sleep(0.05)
    except KeyboardInterrupt:
        echo("🛑 Ctrl+C pressed, shutting down...")
    finally:
        cleanup()
        echo("✅ All processes stopped cleanly.")

if __name__ == "__main__":
    main()
