"""Static template table for the generated front-end project.

Every file this tool writes is listed in ``TEMPLATE_FILES`` as a
``TemplateFile(path, content)`` pair, and every folder it creates is listed in
``FOLDERS``.  Contents are fixed strings: there is no variable substitution.
``TemplateWriter`` materialises both tables under a project root, issuing the
independent writes concurrently.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import NamedTuple


class TemplateFile(NamedTuple):
    """A file to emit, relative to the project root."""

    path: str
    content: str


# ---------------------------------------------------------------------------
# Folder layout
# ---------------------------------------------------------------------------

FOLDERS: list[str] = [
    "src/__tests__",
    "src/assets",
    "src/components/UserControls",
    "src/external",
    "src/helpers",
    "src/hooks",
    "src/redux",
    "src/styles/abstract",
    "src/styles/pages",
    "public",
]

DEFAULT_API_ENDPOINT = "http://localhost:8000"


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------

_HOME_LAYOUT_JSX = """\
import { useDispatch } from "react-redux";
import { useGlobalHook } from "./hooks/useGlobalHook";
import { setWelcomeMessage } from "./redux/globalSlice";

export default function HomeLayout() {
  const { welcomeMessage } = useGlobalHook();
  const dispatch = useDispatch();

  const handleClick = () => {
    dispatch(setWelcomeMessage("hey i am in In hello"));
  };

  return (
    <main style={{ display: "grid", gap: 16 }}>
      <header>
        <h1>HomeLayout</h1>
        <p>Welcome message from Redux: <strong>{welcomeMessage}</strong></p>
      </header>

      <section>
        <button onClick={handleClick} className="btn-change">
          Change Welcome Message
        </button>
      </section>
    </main>
  );
}
"""

_APP_JSX = """\
import "./styles/_main.scss";
import HomeLayout from "./HomeLayout.jsx";
import { Toaster } from "react-hot-toast";
import { useEffect } from "react";
import { useDispatch } from "react-redux";
import { fetchConfig } from "./external/api";

function App() {
  const dispatch = useDispatch();

  useEffect(() => {
    dispatch(fetchConfig());
  }, [dispatch]);

  return (
    <div className="container">
      <HomeLayout />
      <Toaster
        position="top-right"
        toastOptions={{
          duration: 3000,
          style: {
            fontSize: "14px",
            marginTop: 20,
            color: "#fff",
            fontFamily: "Poppins",
            letterSpacing: "0.7px",
          },
          success: { style: { background: "#098d6e" } },
          loading: { style: { background: "#162b42" } },
          error: { style: { background: "#ed5565" } },
        }}
      />
    </div>
  );
}
export default App;
"""

_MAIN_JSX = """\
import React from "react";
import ReactDOM from "react-dom/client";
import App from "./App.jsx";
import { Provider } from "react-redux";
import { store } from "./redux/store";

ReactDOM.createRoot(document.getElementById("root")).render(
  <React.StrictMode>
    <Provider store={store}>
      <App />
    </Provider>
  </React.StrictMode>
);
"""


# ---------------------------------------------------------------------------
# Helpers and hooks
# ---------------------------------------------------------------------------

_HELPER_FUNCTIONS_JS = "export const JPJS = (x)=>JSON.parse(JSON.stringify(x));\n"

_SCREEN_MAPPERS_JSX = "export const screens = {}; // add mappings here\n"

_USE_GLOBAL_HOOK_JS = """\
import { useSelector, useDispatch } from "react-redux";
export const useGlobalHook = () => {
  const dispatch = useDispatch();
  const welcomeMessage = useSelector((s) => s.global.welcomeMessage);
  return { dispatch, welcomeMessage };
};
"""


# ---------------------------------------------------------------------------
# Redux
# ---------------------------------------------------------------------------

_INITIAL_STATE_JS = """\
export const initialState = {
  global: {
    welcomeMessage: "hello",
  },
};
"""

_GLOBAL_SLICE_JS = """\
import { createSlice } from "@reduxjs/toolkit";
import { initialState } from "./initialState";

const globalSlice = createSlice({
  name: "global",
  initialState: initialState.global,
  reducers: {
    setWelcomeMessage(state, action) {
      state.welcomeMessage = action.payload;
    },
  },
});

export const { setWelcomeMessage } = globalSlice.actions;
export default globalSlice.reducer;
"""

_STORE_JS = """\
import { configureStore } from "@reduxjs/toolkit";
import global from "./globalSlice";

export const store = configureStore({
  reducer: {
    global,
  },
});

export default store;
"""


# ---------------------------------------------------------------------------
# External integrations
# ---------------------------------------------------------------------------

_CUSTOM_AXIOS_INSTANCE_JS = """\
import axios from "axios";

export const customAxios = axios.create({
  baseURL: localStorage.getItem("API_ENDPOINT"),
});
"""

_API_JS = """\
import { createAsyncThunk } from "@reduxjs/toolkit";
import axios from "axios";
import { customAxios } from "./customAxiosInstance";

export const fetchConfig = createAsyncThunk(
  "getConfigJson",
  async (_, { rejectWithValue }) => {
    try {
      const res = await axios.get("/config.json");
      const data = await res.data;
      localStorage.setItem("API_ENDPOINT", data.apiEndpoint);
      customAxios.defaults.baseURL = localStorage.getItem("API_ENDPOINT");
      return data;
    } catch (err) {
      return rejectWithValue({
        error: err?.response?.data?.detail || "Could not fetch details.",
      });
    }
  }
);
"""

_TESTS_SETUP_JS = "// vitest/jest setup\n"

_PUBLIC_CONFIG_JSON = json.dumps({"apiEndpoint": DEFAULT_API_ENDPOINT}, indent=2) + "\n"


# ---------------------------------------------------------------------------
# SCSS
# ---------------------------------------------------------------------------

_COLORS_SCSS = """\
$primary: #2563eb;
$accent-blue: #4f46e5;
$ink-900: #0f172a;
$success: #10b981;
$warn: #f59e0b;
$danger: #ef4444;
"""

_VARIABLES_SCSS = """\
$ff: "Poppins", system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif;
$fs-10: 10px; $fs-11: 11px; $fs-12: 12px; $fs-13: 13px; $fs-14: 14px;
$sp-4: 4px; $sp-6: 6px; $sp-8: 8px; $sp-10: 10px; $sp-12: 12px; $sp-16: 16px;
$radius-6: 6px; $radius-8: 8px; $radius-10: 10px;
"""

_MIXINS_SCSS = """\
@import url('https://fonts.googleapis.com/css2?family=Poppins:wght@400;500;700&display=swap');

@mixin app-text($fs, $color, $weight: 400) {
  font-family: 'Poppins';
  font-size: $fs;
  color: $color;
  font-weight: $weight;
  letter-spacing: 0.01em;
}

@mixin flex-center { display:flex; align-items:center; justify-content:center; }

@mixin transition-smooth { transition: all 0.2s ease-in-out; }

@mixin shadow-card { box-shadow: 0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1); }

@mixin shadow-hover { box-shadow: 0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1); }

@mixin layout-row-start() {
  display:flex; flex-direction:row; align-items:flex-start; justify-content:flex-start;
}

@mixin layout($flexdirection: row, $justifycontent: center, $alignitems: center) {
  display:flex; flex-direction:$flexdirection; align-items:$alignitems; justify-content:$justifycontent;
}

@mixin font-props($font-weight, $font-size, $font-color) {
  font-family: "Poppins"; font-weight:$font-weight; font-size:$font-size; color:$font-color;
}

@mixin mobile { @media (max-width: 480px) { @content; } }
@mixin tablet { @media (min-width: 481px) and (max-width: 768px) { @content; } }
@mixin desktop { @media (min-width: 769px) and (max-width: 1279px) { @content; } }
@mixin larger-desktop { @media (min-width: 1280px) { @content; } }
"""

_MAIN_SCSS = """\
@use "abstract/colors";
@use "abstract/variables";
@use "abstract/mixins";

:root { font-family: variables.$ff; color: colors.$ink-900; }
body { margin:0; background:#f8fafc; }

.container { padding: 16px; border: 1px solid rgba(0,0,0,.06); border-radius: 10px; background: #fff; }
.btn-change { @include mixins.app-text(14px, colors.$ink-900, 500); padding: 8px 12px; border:1px solid rgba(0,0,0,.12); border-radius:8px; background:#fff; cursor:pointer; @include mixins.transition-smooth; }
.btn-change:hover { @include mixins.shadow-hover; transform: translateY(-1px); }
"""


# ---------------------------------------------------------------------------
# The table
# ---------------------------------------------------------------------------

TEMPLATE_FILES: list[TemplateFile] = [
    TemplateFile("src/HomeLayout.jsx", _HOME_LAYOUT_JSX),
    TemplateFile("src/helpers/helperFunctions.js", _HELPER_FUNCTIONS_JS),
    TemplateFile("src/helpers/screenMappers.jsx", _SCREEN_MAPPERS_JSX),
    TemplateFile("src/hooks/useGlobalHook.js", _USE_GLOBAL_HOOK_JS),
    TemplateFile("src/redux/initialState.js", _INITIAL_STATE_JS),
    TemplateFile("src/redux/globalSlice.js", _GLOBAL_SLICE_JS),
    TemplateFile("src/redux/store.js", _STORE_JS),
    TemplateFile("src/external/customAxiosInstance.js", _CUSTOM_AXIOS_INSTANCE_JS),
    TemplateFile("src/external/api.js", _API_JS),
    TemplateFile("src/__tests__/setup.js", _TESTS_SETUP_JS),
    TemplateFile("public/config.json", _PUBLIC_CONFIG_JSON),
    TemplateFile("src/styles/abstract/_colors.scss", _COLORS_SCSS),
    TemplateFile("src/styles/abstract/_variables.scss", _VARIABLES_SCSS),
    TemplateFile("src/styles/abstract/_mixins.scss", _MIXINS_SCSS),
    TemplateFile("src/styles/_main.scss", _MAIN_SCSS),
    TemplateFile("src/App.jsx", _APP_JSX),
    TemplateFile("src/main.jsx", _MAIN_JSX),
]


# ---------------------------------------------------------------------------
# TemplateWriter
# ---------------------------------------------------------------------------


class TemplateWriter:
    """Writes the folder and file tables under a project root.

    Both tables default to the module-level ``FOLDERS`` and
    ``TEMPLATE_FILES`` but can be swapped out, which keeps the writer
    usable against a reduced table in tests.
    """

    def __init__(
        self,
        folders: list[str] | None = None,
        files: list[TemplateFile] | None = None,
    ) -> None:
        self.folders = list(FOLDERS if folders is None else folders)
        self.files = list(TEMPLATE_FILES if files is None else files)

    async def create_folders(self, root: str | Path) -> list[Path]:
        """Create every folder under *root* concurrently.

        Returns the created (or already existing) directory paths in table
        order.  The first ``OSError`` propagates.
        """
        base = Path(root)

        async def _mkdir(rel: str) -> Path:
            p = base / rel
            await asyncio.to_thread(p.mkdir, parents=True, exist_ok=True)
            return p

        return list(await asyncio.gather(*[_mkdir(d) for d in self.folders]))

    async def write_files(self, root: str | Path) -> list[Path]:
        """Write every template file under *root* concurrently.

        Parent directories are created automatically and existing files are
        overwritten.  Returns the written paths in table order.
        """
        base = Path(root)

        async def _write(template: TemplateFile) -> Path:
            out = base / template.path
            await asyncio.to_thread(_write_file, out, template.content)
            return out

        return list(await asyncio.gather(*[_write(t) for t in self.files]))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
