"""
Visualization Engine.

Renders a DependencyGraph as a single self-contained HTML page backed by
vis-network (loaded from a CDN).

Key Features:
- File Search: Filter files by path and jump to them in the graph (Ctrl+K).
- Info Bar: Size, import count and dependent count of the selected file.
- Extension Colors: Nodes are tinted by file type.
- Theme Toggle: Light/dark mode, remembered in localStorage.
"""

import json
import logging
import re
import webbrowser
from pathlib import Path
from typing import Any, List

from ..core.types import DependencyGraph

logger = logging.getLogger(__name__)

VIS_NETWORK_URL = "https://unpkg.com/vis-network/standalone/umd/vis-network.min.js"

THEME_STORAGE_KEY = "clipReactMapTheme"

_PLACEHOLDER_RE = re.compile(r"__(?:NODES|EDGES)_DATA__")

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Clip-React Map</title>
    <script type="text/javascript" src="__VIS_NETWORK_URL__"></script>
    <style>
        /* ============================================================
           DESIGN SYSTEM
           ============================================================ */
        :root {
            --bg-color: #ffffff;
            --text-color: #111827;
            --muted-color: #6b7280;
            --card-bg: #ffffff;
            --border-color: #e5e7eb;
            --accent-color: #4f46e5;
            --shadow: 0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1);
            --font-sans: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif;
        }

        body.dark-mode {
            --bg-color: #111827;
            --text-color: #f9fafb;
            --muted-color: #9ca3af;
            --card-bg: #1f2937;
            --border-color: #374151;
            --accent-color: #6366f1;
        }

        * { box-sizing: border-box; }

        html, body {
            margin: 0;
            padding: 0;
            width: 100%;
            height: 100%;
            font-family: var(--font-sans);
            background: var(--bg-color);
            color: var(--text-color);
        }

        #network {
            width: 100%;
            height: 100%;
        }

        /* HEADER */
        .header {
            position: absolute;
            top: 20px;
            left: 20px;
            right: 20px;
            z-index: 10;
            display: flex;
            justify-content: space-between;
            align-items: center;
            pointer-events: none;
        }

        .brand {
            display: flex;
            align-items: center;
            gap: 12px;
            font-weight: 600;
            font-size: 1.1rem;
            pointer-events: auto;
        }

        .brand-logo {
            width: 28px;
            height: 28px;
            border-radius: 6px;
            background: linear-gradient(135deg, var(--accent-color) 0%, #8b5cf6 100%);
            color: #fff;
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 15px;
        }

        /* Search Bar */
        .search-container {
            position: relative;
            margin-left: 12px;
        }

        .search-input {
            width: 350px;
            padding: 10px 36px 10px 16px;
            font-size: 14px;
            border: 1px solid var(--border-color);
            border-radius: 8px;
            background: var(--card-bg);
            color: var(--text-color);
            box-shadow: var(--shadow);
        }

        .search-input:focus {
            border-color: var(--accent-color);
            outline: none;
        }

        .clear-btn {
            position: absolute;
            right: 10px;
            top: 50%;
            transform: translateY(-50%);
            display: none;
            background: none;
            border: none;
            color: var(--muted-color);
            font-size: 18px;
            cursor: pointer;
        }

        .clear-btn.visible { display: block; }

        /* Search Results Dropdown */
        .search-results {
            position: absolute;
            top: 100%;
            left: 0;
            width: 100%;
            margin-top: 6px;
            max-height: 250px;
            overflow-y: auto;
            display: none;
            background: var(--card-bg);
            border: 1px solid var(--border-color);
            border-radius: 8px;
            box-shadow: var(--shadow);
        }

        .search-results.visible { display: block; }

        .search-item {
            padding: 10px 14px;
            font-size: 13px;
            cursor: pointer;
            border-bottom: 1px solid var(--border-color);
        }

        .search-item:last-child { border-bottom: none; }
        .search-item:hover { background: rgba(79, 70, 229, 0.08); }

        /* Theme Toggle */
        .theme-toggle {
            width: 40px;
            height: 40px;
            border-radius: 8px;
            border: 1px solid var(--border-color);
            background: var(--card-bg);
            color: var(--text-color);
            box-shadow: var(--shadow);
            cursor: pointer;
            font-size: 18px;
            pointer-events: auto;
        }

        /* INFO BAR */
        .info-bar {
            position: absolute;
            left: 50%;
            bottom: -120px;
            transform: translateX(-50%);
            z-index: 10;
            display: flex;
            padding: 12px 20px;
            background: var(--card-bg);
            border: 1px solid var(--border-color);
            border-radius: 12px;
            box-shadow: var(--shadow);
            transition: bottom 0.3s ease-in-out;
        }

        .info-bar.visible { bottom: 20px; }

        .info-item {
            padding: 0 16px;
            text-align: center;
            border-right: 1px solid var(--border-color);
        }

        .info-item:last-child { border-right: none; }

        .info-item strong {
            display: block;
            font-size: 18px;
            font-weight: 600;
        }

        .info-item span {
            display: block;
            margin-top: 4px;
            font-size: 11px;
            color: var(--muted-color);
            text-transform: uppercase;
            letter-spacing: 0.8px;
        }
    </style>
</head>
<body>
    <div class="header">
        <div class="brand">
            <div class="brand-logo">📎</div>
            <span>Clip-React Map</span>
            <div class="search-container">
                <input type="text" id="searchInput" class="search-input" placeholder="Search file (Ctrl+K)..." autocomplete="off">
                <button id="clearBtn" class="clear-btn" title="Clear">×</button>
                <div id="searchResults" class="search-results"></div>
            </div>
        </div>
        <button id="themeToggle" class="theme-toggle" title="Toggle theme">🌓</button>
    </div>

    <div id="infoBar" class="info-bar">
        <div class="info-item"><strong id="infoFile"></strong><span>File</span></div>
        <div class="info-item"><strong id="infoSize"></strong><span>Size</span></div>
        <div class="info-item"><strong id="infoDeps"></strong><span>Imports</span></div>
        <div class="info-item"><strong id="infoDependents"></strong><span>Used by</span></div>
    </div>

    <div id="network"></div>

    <script type="text/javascript">
        // ============================================================
        // DATA
        // ============================================================
        const NODES_DATA = __NODES_DATA__;
        const EDGES_DATA = __EDGES_DATA__;

        const EXTENSION_COLORS = {
            js:   { background: '#fefce8', border: '#eab308' },
            jsx:  { background: '#eff6ff', border: '#2563eb' },
            ts:   { background: '#eef2ff', border: '#4f46e5' },
            tsx:  { background: '#eef2ff', border: '#4f46e5' },
            default: { background: '#f8fafc', border: '#94a3b8' }
        };

        function getFileColor(label) {
            const ext = label.split('.').pop().toLowerCase();
            const colors = EXTENSION_COLORS[ext] || EXTENSION_COLORS.default;
            return {
                background: colors.background,
                border: colors.border,
                highlight: { background: '#e0f2fe', border: '#4f46e5' },
                hover: { background: '#e0f2fe', border: '#4f46e5' }
            };
        }

        const nodeIds = new Set(NODES_DATA.map(n => n.id));
        // Imports of files outside the scanned set have no node to attach to
        const drawableEdges = EDGES_DATA.filter(e => nodeIds.has(e.from) && nodeIds.has(e.to));

        const nodes = new vis.DataSet(NODES_DATA.map(n => ({ ...n, color: getFileColor(n.label) })));
        const edges = new vis.DataSet(drawableEdges.map((e, i) => ({ id: i, from: e.from, to: e.to })));

        // ============================================================
        // NETWORK
        // ============================================================
        const options = {
            nodes: {
                shape: 'box',
                margin: { top: 10, right: 12, bottom: 10, left: 12 },
                font: { color: '#111827', size: 14, face: 'system-ui' },
                borderWidth: 1.5,
                shapeProperties: { borderRadius: 4 },
                widthConstraint: { maximum: 250 }
            },
            edges: {
                arrows: { to: { enabled: true, scaleFactor: 0.6 } },
                smooth: { type: 'dynamic' },
                color: { color: '#94a3b8', highlight: '#4f46e5', hover: '#4f46e5' },
                width: 1
            },
            physics: {
                solver: 'forceAtlas2Based',
                forceAtlas2Based: {
                    gravitationalConstant: -50,
                    centralGravity: 0.005,
                    springLength: 250,
                    springConstant: 0.1,
                    avoidOverlap: 0.8
                },
                stabilization: { iterations: 200 }
            },
            interaction: { hover: true, tooltipDelay: 200 }
        };

        const network = new vis.Network(
            document.getElementById('network'),
            { nodes, edges },
            options
        );

        // ============================================================
        // THEME
        // ============================================================
        const THEME_KEY = '__THEME_STORAGE_KEY__';
        let currentTheme = localStorage.getItem(THEME_KEY) || 'light';

        function applyTheme(theme) {
            document.body.classList.toggle('dark-mode', theme === 'dark');
        }

        document.getElementById('themeToggle').addEventListener('click', () => {
            currentTheme = currentTheme === 'light' ? 'dark' : 'light';
            localStorage.setItem(THEME_KEY, currentTheme);
            applyTheme(currentTheme);
        });

        applyTheme(currentTheme);

        // ============================================================
        // INFO BAR
        // ============================================================
        const infoBar = document.getElementById('infoBar');

        function formatBytes(bytes) {
            if (!bytes) return '0 Bytes';
            const units = ['Bytes', 'KB', 'MB', 'GB'];
            const i = Math.min(Math.floor(Math.log(bytes) / Math.log(1024)), units.length - 1);
            return parseFloat((bytes / Math.pow(1024, i)).toFixed(2)) + ' ' + units[i];
        }

        function showInfo(nodeId) {
            const node = nodes.get(nodeId);
            if (!node) return;
            document.getElementById('infoFile').textContent = node.label;
            document.getElementById('infoSize').textContent = formatBytes(node.size);
            document.getElementById('infoDeps').textContent = node.dependencies.length;
            document.getElementById('infoDependents').textContent = node.dependents.length;
            infoBar.classList.add('visible');
        }

        function hideInfo() {
            infoBar.classList.remove('visible');
        }

        network.on('click', params => {
            if (params.nodes.length > 0) {
                showInfo(params.nodes[0]);
            } else {
                hideInfo();
            }
        });

        // ============================================================
        // SEARCH
        // ============================================================
        const searchInput = document.getElementById('searchInput');
        const searchResults = document.getElementById('searchResults');
        const clearBtn = document.getElementById('clearBtn');
        const MAX_RESULTS = 5;

        function focusNode(nodeId) {
            network.focus(nodeId, { scale: 1.2, animation: { duration: 500, easingFunction: 'easeInOutCubic' } });
            network.selectNodes([nodeId]);
            showInfo(nodeId);
            searchResults.classList.remove('visible');
        }

        function clearSearch() {
            searchInput.value = '';
            clearBtn.classList.remove('visible');
            searchResults.innerHTML = '';
            searchResults.classList.remove('visible');
            network.unselectAll();
            hideInfo();
        }

        searchInput.addEventListener('input', () => {
            const query = searchInput.value.toLowerCase();
            clearBtn.classList.toggle('visible', query.length > 0);
            searchResults.innerHTML = '';

            if (!query) {
                searchResults.classList.remove('visible');
                return;
            }

            const matches = NODES_DATA.filter(n => n.id.toLowerCase().includes(query)).slice(0, MAX_RESULTS);
            matches.forEach(n => {
                const item = document.createElement('div');
                item.className = 'search-item';
                item.textContent = n.id;
                item.addEventListener('click', () => {
                    searchInput.value = n.id;
                    focusNode(n.id);
                });
                searchResults.appendChild(item);
            });
            searchResults.classList.toggle('visible', matches.length > 0);
        });

        clearBtn.addEventListener('click', clearSearch);

        document.addEventListener('keydown', event => {
            if ((event.ctrlKey || event.metaKey) && event.key === 'k') {
                event.preventDefault();
                searchInput.focus();
            }
            if (event.key === 'Escape') {
                clearSearch();
            }
        });
    </script>
</body>
</html>
"""


def _embed_json(data: List[Any]) -> str:
    """Serialize for inline <script> use; `</` would end the script block."""
    return json.dumps(data, ensure_ascii=False).replace("</", "<\\/")


def generate_html(graph: DependencyGraph) -> str:
    """
    Generate the HTML content for the graph visualization.
    """
    graph_data = graph.to_dict()
    payloads = {
        "__NODES_DATA__": _embed_json(graph_data["nodes"]),
        "__EDGES_DATA__": _embed_json(graph_data["edges"]),
    }
    template = (
        HTML_TEMPLATE
        .replace("__VIS_NETWORK_URL__", VIS_NETWORK_URL)
        .replace("__THEME_STORAGE_KEY__", THEME_STORAGE_KEY)
    )
    # Single pass so file names can never be mistaken for placeholders
    return _PLACEHOLDER_RE.sub(lambda m: payloads[m.group(0)], template)


def write_visualization(
    graph: DependencyGraph,
    output_path: str | Path,
    open_browser: bool = False,
) -> Path:
    """
    Write the visualization to `output_path`, replacing any existing file.

    Args:
        graph (DependencyGraph): Graph to render.
        output_path (str | Path): Destination HTML file.
        open_browser (bool): Open the written file in the default browser.

    Returns:
        Path: The written file.
    """
    html_content = generate_html(graph)
    out_file = Path(output_path)
    with open(out_file, "w", encoding="utf-8") as f:
        f.write(html_content)
    logger.debug(f"Wrote {len(html_content)} characters to {out_file}")

    if open_browser:
        webbrowser.open(out_file.resolve().as_uri())

    return out_file
