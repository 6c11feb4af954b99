# plotfig.py
import plotly.graph_objects as go
from typing import Optional

from arena import VertexRef
from config import CanvasConfig
from graph import Graph


def vertex_caption(graph: Graph, ref: VertexRef) -> str:
    # Position number (1-based) when the vertex has no label yet
    text = graph.getVertex(ref).displayText()
    return text if text else f"#{graph.indexOf(ref) + 1}"


def build_figure(graph: Graph, marked: Optional[VertexRef] = None,
                 config: Optional[CanvasConfig] = None, height: int = 600) -> go.Figure:
    config = config or CanvasConfig()
    fig = go.Figure()

    # Edges first, one trace each (parallel edges overlap)
    for a, b in graph.getEdges():
        va, vb = graph.getVertex(a), graph.getVertex(b)
        fig.add_trace(go.Scatter(
            x=[va.x, vb.x], y=[va.y, vb.y],
            mode='lines',
            line=dict(color=config.outline, width=1),
            hoverinfo='skip',
            showlegend=False
        ))

    vx = []; vy = []; txt = []; fill = []
    for ref in graph.getVertices():
        v = graph.getVertex(ref)
        vx.append(v.x); vy.append(v.y)
        txt.append(vertex_caption(graph, ref))
        fill.append(config.marked_fill if ref == marked else config.vertex_fill)

    fig.add_trace(go.Scatter(
        x=vx, y=vy, mode='markers+text',
        text=txt, textposition='top right',
        textfont=dict(color=config.label_color, family=config.font_family, size=config.font_size),
        marker=dict(
            size=max(6, int(2 * config.vertex_radius * height)), color=fill,
            line=dict(width=1, color=config.outline),
        ),
        hoverinfo='text',
        showlegend=False
    ))

    # Canvas convention: (0,0) top-left, y grows downwards
    fig.update_xaxes(range=[0, 1], visible=False)
    fig.update_yaxes(range=[1, 0], visible=False, scaleanchor="x", scaleratio=1)
    fig.update_layout(
        margin=dict(l=20, r=20, t=10, b=10),
        plot_bgcolor=config.background,
        height=height
    )
    return fig
