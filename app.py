# app.py
import streamlit as st

from config import setup_logging
from graph import Graph
from plotfig import build_figure, vertex_caption

setup_logging()
st.set_page_config(page_title="Graph Drawer (Web)", layout="wide")

# Session state
if 'graph' not in st.session_state:
    st.session_state.graph = Graph.sampleGraph()

g: Graph = st.session_state.graph

col_btns, col_plot = st.columns([1, 4], gap="large")

with col_btns:
    st.markdown("### Controls")
    if st.button("Sample Graph"):
        st.session_state.graph = g = Graph.sampleGraph()
    if st.button("Clear"):
        st.session_state.graph = g = Graph()
    st.divider()

    # Add vertex by coordinates
    with st.form("add_vertex"):
        x = st.slider("x", 0.0, 1.0, 0.5, 0.01)
        y = st.slider("y", 0.0, 1.0, 0.5, 0.01)
        if st.form_submit_button("Add Vertex"):
            g.addVertex(x, y)

    refs = list(g.getVertices())
    # Selectbox labels are rebuilt every run; map them back to handles
    captions = {f"#{i + 1} ({vertex_caption(g, r)})": r for i, r in enumerate(refs)}

    if len(refs) >= 1:
        with st.form("add_edge"):
            a = st.selectbox("From", list(captions), key="edge_a")
            b = st.selectbox("To", list(captions), key="edge_b")
            if st.form_submit_button("Add Edge"):
                g.addEdge(captions[a], captions[b])

        start = st.selectbox("Vertex", list(captions), key="start")
        c1, c2, c3 = st.columns(3)
        if c1.button("BFS"):
            g.clearLabels()
            g.bfs(captions[start])
        if c2.button("DFS"):
            g.clearLabels()
            g.dfs(captions[start])
        if c3.button("Remove"):
            g.remove(captions[start])

        # Display name; traversal labels take precedence when shown
        with st.form("rename"):
            name = st.text_input("Name", key="name")
            if st.form_submit_button("Rename") and g.contains(captions[start]):
                g.setName(captions[start], name.strip())
    st.divider()

    stats = g.get_stats()
    st.markdown(
        f"Vertices: {stats['vertices']}  \n"
        f"Edges: {stats['edges']}  \n"
        f"Labelled: {stats['labelled']}"
    )

with col_plot:
    st.plotly_chart(build_figure(g), use_container_width=True)
