"""Scaffold a React + Vite + SCSS front end with Redux, Axios and toasts."""

__version__ = "1.0.0"
