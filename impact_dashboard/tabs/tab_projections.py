"""
Impact Dashboard - Projection Explorer Tab
Read-only grid of the selected component's projections across all years.
Visualization: metric trend for one supplier, 2026-2031.
"""

import streamlit as st
import pandas as pd
import plotly.graph_objects as go
from st_aggrid import AgGrid, GridOptionsBuilder, GridUpdateMode, DataReturnMode

from scenario_parameters import COMMON, METRICS
from utils.formatting import format_value
from utils.projection_engine import projections_frame
from utils.query_layer import projection_series, suppliers_by_component
from utils.state_manager import get_state, on_supplier_selected, set_state


def build_trend_figure(rows, field: str) -> go.Figure:
    """Line chart of one projected metric over the horizon."""
    meta = METRICS[field]
    years = [r.year for r in rows]
    values = [getattr(r, field) for r in rows]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=years,
        y=values,
        mode='lines+markers+text',
        text=[format_value(v, meta['unit']) for v in values],
        textposition='top center',
        line=dict(color='#1F4E79', width=3),
    ))
    fig.update_layout(
        title=f"{meta['label']} by Year",
        height=380,
        xaxis=dict(tickmode='array', tickvals=COMMON['YEARS']),
        yaxis_title=meta['label'],
    )
    return fig


def render_projections_tab():
    """Render the projection explorer tab."""
    component = get_state('selected_component')

    st.header(f"📈 {component} Projection Explorer")

    df = projections_frame(component)
    if df.empty:
        st.info("No projections for this component")
        return

    display_df = df.drop(columns=['component']).rename(
        columns={'company_name': 'Company', 'year': 'Year',
                 **{field: meta['label'] for field, meta in METRICS.items()}}
    )

    gb = GridOptionsBuilder.from_dataframe(display_df)
    gb.configure_default_column(editable=False, sortable=True, filter=True)
    gb.configure_column('Company', pinned='left', width=200)
    grid_options = gb.build()

    AgGrid(
        display_df,
        gridOptions=grid_options,
        update_mode=GridUpdateMode.NO_UPDATE,
        data_return_mode=DataReturnMode.AS_INPUT,
        fit_columns_on_grid_load=True,
        height=320,
        key=f'projection_grid_{component}'
    )

    st.markdown("---")
    st.subheader("📊 Supplier Trend")

    names = [s.company_name for s in suppliers_by_component(component)]
    selected = get_state('selected_company')
    trend_key = f'trend_company_{component}'

    # follow map clicks; the picker itself writes back through the same handler
    if selected in names:
        st.session_state[trend_key] = selected
    elif st.session_state.get(trend_key) not in names:
        st.session_state[trend_key] = names[0]

    col1, col2 = st.columns(2)
    with col1:
        company = st.selectbox(
            "Supplier",
            names,
            key=trend_key,
            on_change=lambda: on_supplier_selected(st.session_state[trend_key]),
        )
    with col2:
        fields = list(METRICS)
        field = st.selectbox(
            "Metric",
            fields,
            index=fields.index(get_state('trend_metric', fields[0])),
            format_func=lambda f: METRICS[f]['label'],
            key='trend_metric_picker',
        )
        set_state('trend_metric', field)

    rows = projection_series(company)
    st.plotly_chart(build_trend_figure(rows, field), use_container_width=True)

    series = pd.DataFrame({
        'Year': [r.year for r in rows],
        METRICS[field]['label']: [format_value(getattr(r, field), METRICS[field]['unit']) for r in rows],
    })
    st.dataframe(series, hide_index=True, use_container_width=True)
