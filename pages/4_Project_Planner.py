"""
Project Planner - task checklists and notes per project, with AI-suggested
next steps. Projects live for the browser session only.
"""

import streamlit as st

from config.constants import PROJECT_STATUSES, PROJECT_STATUS_LABELS
from config.settings import configure_logging
from services import project_service
from services.data_service import data_manager

configure_logging(data_manager.settings.log_level)

# Page configuration
st.set_page_config(
    page_title="Project Planner",
    page_icon="🗂️",
    layout="wide",
    initial_sidebar_state="expanded"
)

data_manager.initialize_session_state()


def _save(index: int, project):
    st.session_state.projects[index] = project


st.markdown("## 🗂️ Project Planner")

with st.expander("➕ New Project", expanded=not st.session_state.projects):
    with st.form(key="new_project_form", clear_on_submit=True):
        name = st.text_input("Project name")
        description = st.text_area("Description", height=80)
        category = st.text_input("Category", placeholder="e.g. Engagement")
        submit = st.form_submit_button("Create Project", type="primary")
        if submit:
            if not name.strip():
                st.error("Project name is required.")
            else:
                st.session_state.projects.append(
                    project_service.new_project(name, description, category)
                )
                st.rerun()

projects = st.session_state.projects
if not projects:
    st.info("No projects yet. Create one above.")
    st.stop()

selected = st.selectbox(
    "Project",
    options=range(len(projects)),
    format_func=lambda i: projects[i].name,
    key="planner_selected_project"
)
project = projects[selected]

col1, col2, col3 = st.columns([2, 1, 1])
with col1:
    st.markdown(f"### {project.name}")
    st.caption(project.description or "No description.")
with col2:
    status = st.selectbox(
        "Status",
        options=PROJECT_STATUSES,
        index=PROJECT_STATUSES.index(project.status),
        format_func=lambda s: PROJECT_STATUS_LABELS[s],
        key=f"status_{project.id}"
    )
    if status != project.status:
        _save(selected, project_service.set_status(project, status))
        st.rerun()
with col3:
    st.metric("Progress", f"{project_service.task_progress(project)}%")
    if st.button("🗑️ Delete Project", key=f"delete_{project.id}"):
        projects.pop(selected)
        st.rerun()

tasks_tab, notes_tab = st.tabs(["✅ Tasks", "📝 Notes"])

with tasks_tab:
    for task in project.tasks:
        task_col, remove_col = st.columns([6, 1])
        with task_col:
            checked = st.checkbox(task.title, value=task.completed, key=f"task_{task.id}")
            if checked != task.completed:
                _save(selected, project_service.toggle_task(project, task.id))
                st.rerun()
        with remove_col:
            if st.button("✖", key=f"remove_{task.id}", help="Remove task"):
                _save(selected, project_service.remove_task(project, task.id))
                st.rerun()

    with st.form(key=f"add_task_{project.id}", clear_on_submit=True):
        title = st.text_input("New task", label_visibility="collapsed", placeholder="Add a task...")
        if st.form_submit_button("Add Task"):
            _save(selected, project_service.add_task(project, title))
            st.rerun()

    gateway = data_manager.gateway()
    if st.button("✨ Suggest Next Steps", key=f"suggest_{project.id}", disabled=not gateway.is_ready()):
        with st.spinner("Asking PPA for suggestions..."):
            updated, error = project_service.apply_suggestions(project, gateway)
        if error:
            st.error(error)
        else:
            _save(selected, updated)
            st.rerun()
    if not gateway.is_ready():
        st.caption("🔒 Add an API key to enable AI suggestions.")

with notes_tab:
    notes = st.text_area("Notes", value=project.notes, height=200, key=f"notes_{project.id}")
    if st.button("💾 Save Notes", key=f"save_notes_{project.id}"):
        _save(selected, project_service.set_notes(project, notes))
        st.success("Notes saved.")
