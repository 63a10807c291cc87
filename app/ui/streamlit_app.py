import requests
import streamlit as st

from app.core.config import settings
from app.ui.activity import (
    ActivityLog,
    ActivityLogEntry,
    coerce_input,
    missing_required,
    param_widget_key,
    stale_param_keys,
)
from app.ui.api_client import McpApiClient

client = McpApiClient(settings.api_url)

st.set_page_config(page_title="MCP Tool Dashboard", layout="wide")
st.title("MCP Tool Dashboard")

if "activity" not in st.session_state:
    st.session_state.activity = ActivityLog(settings.activity_log_limit)
if "selected" not in st.session_state:
    st.session_state.selected = None
if "result" not in st.session_state:
    st.session_state.result = None


def load_servers():
    """Returns (servers, error)."""
    try:
        return client.get_servers(), None
    except requests.RequestException:
        return [], "Failed to load servers"


def load_tools():
    try:
        return client.get_all_tools()
    except requests.RequestException as e:
        st.warning(f"Error loading tools: {e}")
        return []


def render_parameter_input(server_id: str, tool_name: str, param: dict):
    key = param_widget_key(server_id, tool_name, param["name"])
    label = f"{param['name']} *" if param.get("required") else param["name"]
    ptype = param.get("type")

    if ptype == "number":
        raw = st.text_input(label, key=key, help=param.get("description"), placeholder=f"Enter {param['name']}")
    elif ptype == "boolean":
        raw = st.selectbox(label, ["", "true", "false"], key=key, help=param.get("description"),
                           format_func=lambda v: v.capitalize() if v else "Select...")
    elif ptype in ("object", "array"):
        raw = st.text_area(label, key=key, help=param.get("description"), placeholder="JSON")
    else:
        raw = st.text_input(label, key=key, help=param.get("description"), placeholder=f"Enter {param['name']}")
    return coerce_input(param, raw)


def render_result(result: dict):
    st.subheader("Execution Result")
    if result.get("success"):
        st.success("Success")
    else:
        st.error("Failed")
    st.caption(f"Duration: {result.get('duration', 0)}ms | Time: {result.get('timeStamp', '')}")
    if result.get("success"):
        st.json(result.get("result"))
    else:
        st.markdown(f"**Error:** {result.get('error')}")


server_col, tools_col, run_col = st.columns([1, 1, 2])

# ------------------------------------------------------------
# Servers
# ------------------------------------------------------------
with server_col:
    st.subheader("MCP Servers")
    with st.spinner("Loading servers..."):
        servers, error = load_servers()
    if error:
        st.error(error)
        if st.button("Retry"):
            st.rerun()
    for server in servers:
        status = "Active" if server.get("isActive") else "Inactive"
        st.markdown(f"**{server['name']}** `{status}`")
        st.caption(server.get("description", ""))

# ------------------------------------------------------------
# Tools
# ------------------------------------------------------------
with tools_col:
    st.subheader("Available Tools")
    for entry in load_tools():
        server = entry["server"]
        st.markdown(f"**{server['name']}**")
        if entry.get("error"):
            st.caption(f"Error: {entry['error']}")
        for tool in entry.get("tools", []):
            sig = ", ".join(f"{p['name']}: {p['type']}" for p in tool.get("parameters", []))
            if st.button(tool["name"], key=f"tool::{server['id']}::{tool['name']}", help=tool.get("description")):
                for key in stale_param_keys(list(st.session_state.keys()), server["id"], tool["name"]):
                    del st.session_state[key]
                st.session_state.selected = {"server": server, "tool": tool}
                st.session_state.result = None
            st.caption(sig or tool.get("description", ""))

# ------------------------------------------------------------
# Execute
# ------------------------------------------------------------
with run_col:
    selected = st.session_state.selected
    if selected:
        server, tool = selected["server"], selected["tool"]
        st.subheader(f"Execute: {tool['name']}")
        st.caption(f"Server: {server['name']}")

        values = {}
        for param in tool.get("parameters", []):
            values[param["name"]] = render_parameter_input(server["id"], tool["name"], param)

        missing = missing_required(tool.get("parameters", []), values)
        if st.button("Execute Tool", disabled=bool(missing), type="primary"):
            params = {k: v for k, v in values.items() if v is not None}
            with st.spinner("Executing..."):
                result = client.call_tool(tool["name"], server["id"], params)
            st.session_state.result = result
            st.session_state.activity.record(ActivityLogEntry.from_envelope(tool["name"], server["name"], result))

    if st.session_state.result:
        render_result(st.session_state.result)

    activity = st.session_state.activity.entries()
    if activity:
        st.subheader("Recent Activity")
        for log in activity:
            label = "Success" if log.success else "Failed"
            st.markdown(
                f"**{log.tool_name}** on {log.server_name} | {label} | "
                f"{log.duration}ms | {log.time_stamp.strftime('%H:%M:%S')}"
            )
            if log.error:
                st.caption(log.error)
