# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Server-rendered admin page for the user directory.
Markup only; the inline script calls the JSON API and reloads.
"""

from html import escape

from user_directory.models.domain import FormDraft, PageView, ViewState

STYLE = """
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body {
        font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
        background: #0f172a;
        color: #e2e8f0;
        min-height: 100vh;
    }
    header { padding: 1.25rem 2rem; border-bottom: 1px solid #334155; }
    header h1 {
        font-size: 1.75rem;
        background: linear-gradient(135deg, #3b82f6, #8b5cf6);
        -webkit-background-clip: text;
        -webkit-text-fill-color: transparent;
    }
    main { max-width: 960px; margin: 2rem auto; padding: 0 1rem; }
    .card {
        background: #1e293b;
        border: 1px solid #334155;
        border-radius: 0.75rem;
        padding: 1.5rem;
        margin-bottom: 1.5rem;
    }
    .card h2, .card h3 { color: #3b82f6; margin-bottom: 0.75rem; }
    input {
        background: #0f172a;
        border: 1px solid #334155;
        border-radius: 0.5rem;
        color: #e2e8f0;
        padding: 0.5rem 0.75rem;
        margin-right: 0.5rem;
    }
    input.error { border-color: #ef4444; }
    #search { width: 100%; }
    button {
        border: none;
        border-radius: 0.5rem;
        padding: 0.5rem 1rem;
        font-weight: 600;
        cursor: pointer;
        background: #3b82f6;
        color: #fff;
    }
    button.btn-delete { background: #dc2626; }
    button:disabled { background: #475569; cursor: not-allowed; }
    .error-messages p { color: #f87171; margin-top: 0.5rem; font-size: 0.875rem; }
    table { width: 100%; border-collapse: collapse; }
    th, td { text-align: left; padding: 0.6rem; border-bottom: 1px solid #334155; }
    th { color: #94a3b8; font-weight: 600; }
    .no-users { color: #94a3b8; text-align: center; padding: 1rem; }
    .pagination { display: flex; gap: 1rem; align-items: center; justify-content: center; }
"""

SCRIPT = """
    async function call(method, url, body) {
        const opts = { method: method, headers: { "Content-Type": "application/json" } };
        if (body !== undefined) { opts.body = JSON.stringify(body); }
        const resp = await fetch(url, opts);
        let data = null;
        try { data = await resp.json(); } catch (e) { data = null; }
        if (resp.status >= 500) { console.error(method, url, resp.status, data); }
        if (resp.ok && data && data.notice) { alert(data.notice); }
        window.location.reload();
    }
    function search(term) {
        sessionStorage.setItem("focusSearch", "1");
        call("PUT", "/api/v1/directory/search", { term: term });
    }
    if (sessionStorage.getItem("focusSearch")) {
        sessionStorage.removeItem("focusSearch");
        const box = document.getElementById("search");
        box.focus();
        box.setSelectionRange(box.value.length, box.value.length);
    }
    function addUser() {
        call("POST", "/api/v1/directory/users", {
            name: document.getElementById("name").value,
            email: document.getElementById("email").value,
        });
    }
    function deleteUser(id) { call("DELETE", "/api/v1/directory/users/" + encodeURIComponent(id)); }
    function nextPage() { call("POST", "/api/v1/directory/page/next"); }
    function prevPage() { call("POST", "/api/v1/directory/page/prev"); }
"""


def _error_class(draft: FormDraft, field_name: str) -> str:
    return ' class="error"' if field_name in draft.errors else ""


def _disabled(flag: bool) -> str:
    return "" if flag else " disabled"


def render_rows(view: PageView) -> str:
    if not view.users:
        return '<p class="no-users">No users found.</p>'
    rows = []
    for user in view.users:
        uid = escape(str(user.id))
        rows.append(
            "<tr>"
            f"<td>{uid}</td>"
            f"<td>{escape(user.name)}</td>"
            f"<td>{escape(user.email)}</td>"
            f'<td><button class="btn-delete" data-id="{uid}" '
            'onclick="deleteUser(this.dataset.id)">Delete</button></td>'
            "</tr>"
        )
    return (
        '<table class="user-table"><thead><tr>'
        "<th>ID</th><th>Name</th><th>Email</th><th>Actions</th>"
        "</tr></thead><tbody>" + "".join(rows) + "</tbody></table>"
    )


def render_page(view: PageView, state: ViewState, draft: FormDraft) -> str:
    """Full HTML document for the current derived view."""
    errors = "".join(
        f"<p>{escape(draft.errors[f])}</p>" for f in ("name", "email") if f in draft.errors
    )
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>User Management</title>
    <style>{STYLE}</style>
</head>
<body>
    <header><h1>Admin Dashboard</h1></header>
    <main>
        <div class="card">
            <h2>User Management</h2>
            <input id="search" type="text" placeholder="Search by id, name or email"
                   value="{escape(state.search_term)}" oninput="search(this.value)">
        </div>
        <div class="card add-user-form">
            <h3>Add New User</h3>
            <input id="name" type="text" placeholder="Name" value="{escape(draft.name)}"{_error_class(draft, 'name')}>
            <input id="email" type="email" placeholder="Email" value="{escape(draft.email)}"{_error_class(draft, 'email')}>
            <button class="btn-add" onclick="addUser()">Add User</button>
            <div class="error-messages">{errors}</div>
        </div>
        <div class="card">
            {render_rows(view)}
        </div>
        <div class="pagination">
            <button id="prev" onclick="prevPage()"{_disabled(view.has_prev_page)}>Prev</button>
            <span>Page {view.page}</span>
            <button id="next" onclick="nextPage()"{_disabled(view.has_next_page)}>Next</button>
        </div>
    </main>
    <script>{SCRIPT}</script>
</body>
</html>
"""
