"""
Impact Dashboard - Supplier Map Tab
Map of the selected component's suppliers; clicking a marker shows the
projected impact for that supplier in the selected year.
"""

import streamlit as st
import plotly.graph_objects as go

from config import MAP_HEIGHT
from scenario_parameters import MAP, METRICS
from utils.formatting import format_impact, format_value
from utils.query_layer import component_totals, suppliers_by_component
from utils.reference_data import suppliers_frame
from utils.state_manager import current_impact, get_state, on_supplier_selected


def build_supplier_map(suppliers) -> go.Figure:
    """One labelled marker per supplier, company name carried in customdata."""
    df = suppliers_frame(suppliers)
    colors = [MAP['COMPONENT_COLORS'].get(c, '#333333') for c in df['component']]

    fig = go.Figure()
    fig.add_trace(go.Scattergeo(
        lat=df['latitude'],
        lon=df['longitude'],
        text=df['company_name'],
        customdata=df['company_name'],
        hovertext=df['company_name'] + ' - ' + df['city'] + ', ' + df['state'],
        hoverinfo='text',
        mode='markers+text',
        textposition='top center',
        marker=dict(size=MAP['MARKER_SIZE'], color=colors, line=dict(width=1, color='white')),
    ))
    fig.update_layout(
        geo=dict(scope=MAP['SCOPE'], showland=True, landcolor='#F2F2F2', subunitcolor='#BBBBBB'),
        margin=dict(l=0, r=0, t=10, b=0),
        height=MAP_HEIGHT,
        clickmode='event+select',
        showlegend=False,
    )
    return fig


def selected_company_from_event(event):
    """Company name of the first selected point in a plotly selection event, if any."""
    if not event:
        return None
    points = event.get('selection', {}).get('points', [])
    if not points:
        return None
    custom = points[0].get('customdata')
    if isinstance(custom, (list, tuple)):
        custom = custom[0] if custom else None
    return custom or None


def render_impact_panel(impact):
    """Six formatted fields, or a neutral message when nothing is selected or found."""
    if impact is None:
        st.info("Click a supplier marker to see its projected impact.")
        return

    st.subheader(f"🏭 {impact.company_name} · {impact.year}")
    st.caption(f"Component: {impact.component}")
    pairs = format_impact(impact)
    for row_start in range(0, len(pairs), 3):
        cols = st.columns(3)
        for col, (label, text) in zip(cols, pairs[row_start:row_start + 3]):
            with col:
                st.metric(label, text)


def render_supplier_map_tab():
    """Render the supplier map tab."""
    component = get_state('selected_component')
    year = get_state('selected_year')

    st.header(f"🗺️ {component} Suppliers - {year} Outlook")

    totals = component_totals(component, year)
    cols = st.columns(len(METRICS))
    for col, (field, meta) in zip(cols, METRICS.items()):
        with col:
            st.metric(f"Σ {meta['label']}", format_value(totals[field], meta['unit']))

    st.markdown("---")

    suppliers = suppliers_by_component(component)
    if not suppliers:
        st.warning(f"No suppliers recorded for {component}")
        return

    map_key = f"supplier_map_{component}"
    picker_key = f"supplier_picker_{component}"
    names = [s.company_name for s in suppliers]

    col_map, col_detail = st.columns([3, 2])

    with col_map:
        st.plotly_chart(
            build_supplier_map(suppliers),
            use_container_width=True,
            on_select=lambda: _handle_map_click(map_key),
            selection_mode="points",
            key=map_key,
        )

    with col_detail:
        # keep the fallback picker in step with map clicks
        current = get_state('selected_company')
        st.session_state[picker_key] = current if current in names else None
        st.selectbox(
            "Supplier",
            [None] + names,
            format_func=lambda n: "- select on map -" if n is None else n,
            key=picker_key,
            on_change=lambda: on_supplier_selected(st.session_state[picker_key]),
        )

        render_impact_panel(current_impact())


def _handle_map_click(map_key):
    clicked = selected_company_from_event(st.session_state.get(map_key))
    if clicked:
        on_supplier_selected(clicked)
