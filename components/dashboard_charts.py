"""Team dashboard UI component: stat cards and charts."""

import streamlit as st
import plotly.express as px
from typing import Sequence

from models.update import UpdateRecord
from services import aggregator


class DashboardComponent:
    """Component for the team health and progress overview."""

    def render(self, records: Sequence[UpdateRecord]):
        """Render stat cards, the health pie chart and the goal progress bars."""
        stats = aggregator.compute_stats(records)

        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("👥 Team Members", stats.team_member_count)
        with col2:
            st.metric("📈 Avg Team Progress", f"{stats.average_progress}%")
        with col3:
            st.metric("✅ Healthy Projects", stats.healthy_count)
        with col4:
            st.metric("⚠️ At Risk", stats.at_risk_count)

        if not records:
            st.info("No team updates loaded. Import a file or load the sample data.")
            return

        col1, col2 = st.columns([1, 1])

        with col1:
            st.markdown("#### Project Health")
            health_df = aggregator.health_chart_frame(records)
            fig_health = px.pie(
                health_df,
                values='value',
                names='name',
                color='name',
                color_discrete_map=dict(zip(health_df['name'], health_df['color'])),
                hole=0.55,
            )
            fig_health.update_traces(textposition='inside', textinfo='value+label')
            fig_health.update_layout(height=350, margin=dict(l=20, r=20, t=20, b=20))
            st.plotly_chart(fig_health, width='stretch')

        with col2:
            st.markdown("#### Progress by Priority Goal")
            goal_df = aggregator.goal_chart_frame(records)
            fig_goals = px.bar(
                goal_df,
                x='name',
                y='avg_progress',
                color_discrete_sequence=['#4f46e5'],
            )
            fig_goals.update_layout(
                height=350,
                showlegend=False,
                margin=dict(l=20, r=20, t=20, b=20),
                xaxis=dict(title=''),
                yaxis=dict(title='Avg Progress (%)', range=[0, 100]),
            )
            st.plotly_chart(fig_goals, width='stretch')


# Global instance
dashboard_component = DashboardComponent()
