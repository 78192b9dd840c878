# -----------------------------------------------------------------------------
# Streamlit Frontend for the Greedy Algorithm Visualizer
# Purpose:
#   Minimal replay client: (1) load/edit a graph, (2) run one algorithm via
#   the API, and (3) step through the returned trace one frame at a time.
#
#---------------------------------------------------------------------------

import os, json, requests, streamlit as st
from dotenv import load_dotenv

# Load .env to pick API_URL at runtime for local/remote backends
load_dotenv()
API_URL = os.getenv("API_URL", "http://127.0.0.1:8000")

st.set_page_config(page_title="Greedy Algorithm Visualizer", layout="wide")
st.title("Greedy Algorithm Visualizer — Kruskal · Prim · Dijkstra")


def _inf(v):
    # Unreachable distances arrive as null
    return "∞" if v is None else v


@st.cache_data
def load_sample():
    r = requests.get(f"{API_URL}/api/sample-graph")
    r.raise_for_status()
    return r.json()


# ---------------- Sidebar: algorithm + parameters -----------------------------
with st.sidebar:
    algorithm = st.radio("Algorithm", ["kruskal", "prim", "dijkstra"],
                         format_func=lambda a: a.capitalize())
    if st.checkbox("Show algorithm info"):
        r = requests.get(f"{API_URL}/api/{algorithm}/info")
        if r.status_code == 200:
            st.json(r.json())
    start = source = target = ""
    if algorithm == "prim":
        start = st.text_input("Start node (optional)")
    if algorithm == "dijkstra":
        source = st.text_input("Source node", value="A")
        target = st.text_input("Target node (optional)")

# ---------------- Main Form: graph + run ---------------------------------------
try:
    sample_text = json.dumps(load_sample(), indent=2)
except requests.RequestException as e:
    st.warning(f"Could not load sample graph: {e}")
    sample_text = '{"nodes": [], "edges": []}'

with st.form("graph_form"):
    graph_text = st.text_area("Graph (JSON)", value=sample_text, height=320)
    submit = st.form_submit_button("Run Algorithm")

if submit:
    try:
        graph = json.loads(graph_text)
    except json.JSONDecodeError as e:
        st.error(f"Graph is not valid JSON: {e}")
        st.stop()
    payload = {"graph": graph}
    if algorithm == "prim" and start:
        payload["startNode"] = start
    if algorithm == "dijkstra":
        payload["sourceNode"] = source or None
        payload["targetNode"] = target or None
    with st.spinner("Running algorithm..."):
        r = requests.post(f"{API_URL}/api/{algorithm}", json=payload)
    if r.status_code != 200:
        err = r.json() if r.headers.get("content-type", "").startswith("application/json") else {}
        st.error(f"{err.get('error', 'Request failed')}: {err.get('message', r.text)}")
        st.stop()
    st.session_state["run"] = r.json()
    st.session_state["frame"] = 0

# ---------------- Replay ------------------------------------------------------
run = st.session_state.get("run")
if run:
    steps = run["steps"]
    last = len(steps) - 1
    col_prev, col_slider, col_next = st.columns([1, 8, 1])
    if col_prev.button("◀ Prev") and st.session_state["frame"] > 0:
        st.session_state["frame"] -= 1
    if col_next.button("Next ▶") and st.session_state["frame"] < last:
        st.session_state["frame"] += 1
    if last > 0:
        frame = col_slider.slider("Step", 0, last, key="frame")
    else:
        frame = 0
    step = steps[frame]

    st.subheader(f"{run['algorithm']} — step {step['step']} ({step['action']})")
    st.info(step["description"])

    if run["algorithm"] in ("Kruskal", "Prim"):
        st.metric("Total cost", step.get("totalCost", 0))
        if "sortedEdges" in step:
            st.markdown("**Edges (sorted)**")
            st.table([{"edge": e["id"], "weight": e["weight"], "status": e["status"]}
                      for e in step["sortedEdges"]])
            st.markdown("**Components**")
            st.write([" ".join(c) for c in step["unionFindState"]])
        if "priorityQueue" in step:
            st.markdown("**Visited:** " + ", ".join(step["visitedNodes"]))
            st.markdown("**Frontier**")
            st.table(step["priorityQueue"] or [{"edge": "—"}])
        st.markdown("**Tree edges**")
        st.write([f"{e['from']}-{e['to']} ({e['weight']})" for e in step["mstEdges"]])
    else:
        st.markdown("**Distances**")
        st.table([{"node": k, "distance": _inf(v), "via": step["previous"].get(k)}
                  for k, v in step["distances"].items()])
        st.markdown("**Frontier:** " + ", ".join(
            f"{q['nodeId']}:{_inf(q['distance'])}" for q in step["priorityQueue"]))
        if step.get("updatedNeighbors"):
            st.table(step["updatedNeighbors"])
        st.markdown("**Paths**")
        st.write({k: " → ".join(p["path"]) or "no path" for k, p in step["shortestPaths"].items()})

    with st.expander("Final result"):
        st.json(run["finalResult"])
