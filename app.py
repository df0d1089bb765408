"""Tkinter desktop app for generating words from a set of letters."""

from __future__ import annotations

import logging
import queue
import threading
import tkinter as tk
from pathlib import Path
from tkinter import filedialog, messagebox, ttk

from models import GeneratorOptions, IndexBuildResult, SolveReport
from solver import AnagramSolver
from utils import export_report, load_config, save_config, setup_logging


class AnagramGeneratorApp(tk.Tk):
    """Desktop UI for loading wordlists and listing words spelled by input letters."""

    def __init__(self) -> None:
        super().__init__()
        setup_logging()
        self.logger = logging.getLogger(__name__)

        self.title("Anagram Generator")
        self.geometry("900x680")
        self.minsize(760, 520)

        self.solver: AnagramSolver | None = None
        self.current_report: SolveReport | None = None
        self.indexing_thread: threading.Thread | None = None
        self.worker_queue: queue.Queue[tuple] = queue.Queue()
        self.is_indexing = False

        self.config_data = load_config()
        self._build_vars()
        self._build_ui()
        self.after(100, self._poll_worker_queue)

    def _build_vars(self) -> None:
        self.wordlist_var = tk.StringVar(value=self.config_data.get("last_wordlist_path", ""))
        self.min_length_var = tk.IntVar(value=self.config_data["min_word_length"])
        self.max_length_var = tk.IntVar(value=self.config_data["max_word_length"])
        self.speed_cache_var = tk.BooleanVar(value=True)
        self.letters_var = tk.StringVar(value="")
        self.status_var = tk.StringVar(value="Load a wordlist to build the index.")
        self.count_var = tk.StringVar(value="")

    def _build_ui(self) -> None:
        self.columnconfigure(0, weight=1)
        self.rowconfigure(3, weight=1)

        top = ttk.Frame(self, padding=8)
        top.grid(row=0, column=0, sticky="ew")
        top.columnconfigure(1, weight=1)

        ttk.Label(top, text="Wordlist (.txt):").grid(row=0, column=0, sticky="w", padx=(0, 8))
        self.wordlist_entry = ttk.Entry(top, textvariable=self.wordlist_var)
        self.wordlist_entry.grid(row=0, column=1, sticky="ew", padx=(0, 8))
        ttk.Button(top, text="Browse", command=self._browse_wordlist).grid(row=0, column=2, padx=(0, 8))
        self.index_button = ttk.Button(top, text="Load + Index", command=self._start_indexing)
        self.index_button.grid(row=0, column=3)

        options = ttk.LabelFrame(self, text="Options", padding=8)
        options.grid(row=1, column=0, sticky="ew", padx=8, pady=(0, 6))
        ttk.Label(options, text="Min length:").grid(row=0, column=0, sticky="w", padx=(0, 4))
        ttk.Spinbox(options, from_=0, to=30, width=5, textvariable=self.min_length_var).grid(row=0, column=1, padx=(0, 12))
        ttk.Label(options, text="Max length:").grid(row=0, column=2, sticky="w", padx=(0, 4))
        ttk.Spinbox(options, from_=0, to=30, width=5, textvariable=self.max_length_var).grid(row=0, column=3, padx=(0, 12))
        ttk.Checkbutton(options, text="Speed mode (cache index)", variable=self.speed_cache_var).grid(row=0, column=4, sticky="w")

        query = ttk.Frame(self, padding=(8, 0, 8, 6))
        query.grid(row=2, column=0, sticky="ew")
        query.columnconfigure(1, weight=1)
        ttk.Label(query, text="Letters:").grid(row=0, column=0, sticky="w", padx=(0, 8))
        letters_entry = ttk.Entry(query, textvariable=self.letters_var, font=("Segoe UI", 12))
        letters_entry.grid(row=0, column=1, sticky="ew", padx=(0, 8))
        letters_entry.bind("<Return>", lambda _event: self._generate_clicked())
        ttk.Button(query, text="Generate", command=self._generate_clicked).grid(row=0, column=2, padx=(0, 8))
        ttk.Button(query, text="Clear", command=self._clear_input_and_results).grid(row=0, column=3)

        results_frame = ttk.LabelFrame(self, text="Words", padding=8)
        results_frame.grid(row=3, column=0, sticky="nsew", padx=8, pady=(0, 6))
        results_frame.columnconfigure(0, weight=1)
        results_frame.rowconfigure(0, weight=1)
        self.results_tree = ttk.Treeview(
            results_frame,
            columns=("word", "length"),
            show="headings",
            height=16,
        )
        self.results_tree.heading("word", text="Word")
        self.results_tree.heading("length", text="Length")
        self.results_tree.column("word", width=320, anchor=tk.W)
        self.results_tree.column("length", width=80, anchor=tk.CENTER)
        tree_scroll = ttk.Scrollbar(results_frame, orient=tk.VERTICAL, command=self.results_tree.yview)
        self.results_tree.configure(yscrollcommand=tree_scroll.set)
        self.results_tree.grid(row=0, column=0, sticky="nsew")
        tree_scroll.grid(row=0, column=1, sticky="ns")

        bottom = ttk.Frame(self, padding=8)
        bottom.grid(row=4, column=0, sticky="ew")
        bottom.columnconfigure(0, weight=1)
        ttk.Label(bottom, textvariable=self.count_var).grid(row=0, column=0, sticky="w")
        ttk.Button(bottom, text="Copy Words", command=self._copy_words).grid(row=0, column=1, padx=(0, 8))
        ttk.Button(bottom, text="Save Results", command=self._save_results).grid(row=0, column=2)

        status_row = ttk.Frame(self, padding=(8, 0, 8, 8))
        status_row.grid(row=5, column=0, sticky="ew")
        status_row.columnconfigure(1, weight=1)
        ttk.Label(status_row, text="Status:").grid(row=0, column=0, sticky="w", padx=(0, 8))
        ttk.Label(status_row, textvariable=self.status_var).grid(row=0, column=1, sticky="w")
        self.progress = ttk.Progressbar(status_row, orient=tk.HORIZONTAL, length=220, mode="determinate", maximum=100)
        self.progress.grid(row=0, column=2, sticky="e")

    def _browse_wordlist(self) -> None:
        path = filedialog.askopenfilename(
            title="Select wordlist file",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")],
        )
        if path:
            self.wordlist_var.set(path)

    def _current_options(self) -> GeneratorOptions | None:
        try:
            return GeneratorOptions(
                min_word_length=int(self.min_length_var.get()),
                max_word_length=int(self.max_length_var.get()),
                use_speed_cache=self.speed_cache_var.get(),
            )
        except (tk.TclError, ValueError):
            messagebox.showerror("Invalid length", "Word lengths must be whole numbers.")
            return None

    def _start_indexing(self) -> None:
        if self.is_indexing:
            return

        path = self.wordlist_var.get().strip()
        if not path:
            messagebox.showerror("Missing wordlist", "Please select a wordlist file first.")
            return
        resolved = str(Path(path).resolve())
        if not Path(resolved).exists():
            messagebox.showerror("File not found", f"Wordlist does not exist:\n{path}")
            return
        self.wordlist_var.set(resolved)

        options = self._current_options()
        if options is None:
            return

        self.is_indexing = True
        self.progress.configure(value=0)
        self.status_var.set("Indexing wordlist in background...")
        self.index_button.configure(state=tk.DISABLED)

        self.indexing_thread = threading.Thread(
            target=self._build_index_worker,
            args=(resolved, options),
            daemon=True,
        )
        self.indexing_thread.start()

    def _build_index_worker(self, path: str, options: GeneratorOptions) -> None:
        # The new solver is only published once indexing completes.
        solver = AnagramSolver(options.min_word_length, options.max_word_length)
        try:
            result = solver.build_index(
                wordlist_path=path,
                options=options,
                progress_callback=lambda pct: self.worker_queue.put(("progress", pct)),
            )
            self.worker_queue.put(("index_done", solver, result))
        except Exception as exc:
            self.logger.exception("Failed building index")
            self.worker_queue.put(("error", f"Failed to build index: {exc}"))

    def _poll_worker_queue(self) -> None:
        try:
            while True:
                event = self.worker_queue.get_nowait()
                kind = event[0]
                if kind == "progress":
                    pct = max(0.0, min(float(event[1]), 1.0))
                    self.progress.configure(value=int(pct * 100))
                elif kind == "index_done":
                    self._handle_index_done(event[1], event[2])
                elif kind == "error":
                    self._handle_worker_error(event[1])
        except queue.Empty:
            pass
        finally:
            self.after(100, self._poll_worker_queue)

    def _handle_index_done(self, solver: AnagramSolver, result: IndexBuildResult) -> None:
        self.solver = solver
        self.is_indexing = False
        self.index_button.configure(state=tk.NORMAL)
        self.progress.configure(value=100)

        source = "cache" if result.loaded_from_cache else "wordlist"
        status = (
            f"Index ready from {source}: {result.accepted_words} words, "
            f"{result.unique_signatures} signatures."
        )
        if not solver.options.has_valid_bounds():
            status += " Length bounds admit no words."
        self.status_var.set(status)
        self.config_data["last_wordlist_path"] = result.wordlist_path
        self.config_data["min_word_length"] = solver.min_word_length
        self.config_data["max_word_length"] = solver.max_word_length
        save_config(self.config_data)

    def _handle_worker_error(self, message: str) -> None:
        self.is_indexing = False
        self.index_button.configure(state=tk.NORMAL)
        self.progress.configure(value=0)
        self.status_var.set("Indexing failed.")
        messagebox.showerror("Indexing error", message)

    def _generate_clicked(self) -> None:
        if self.is_indexing:
            messagebox.showinfo("Indexing in progress", "Please wait for indexing to finish.")
            return
        if self.solver is None:
            messagebox.showerror("No index", "Please load and index a wordlist before generating.")
            return

        options = self._current_options()
        if options is None:
            return
        if (
            options.min_word_length != self.solver.min_word_length
            or options.max_word_length != self.solver.max_word_length
        ):
            messagebox.showwarning(
                "Re-index required",
                "Word length bounds changed since indexing. Rebuild the index with current options first.",
            )
            return

        letters = self.letters_var.get()
        if not letters.strip():
            messagebox.showinfo("Empty input", "Type the letters to generate words from first.")
            return

        try:
            report = self.solver.solve_report(letters)
        except Exception as exc:
            self.logger.exception("Generate failed")
            messagebox.showerror("Generate error", f"Could not generate words: {exc}")
            return

        self.current_report = report
        self._render_results(report)
        self.status_var.set(
            f"Checked {report.combinations_checked} combinations, "
            f"{report.matched_signatures} matched."
        )

    def _render_results(self, report: SolveReport) -> None:
        self.results_tree.delete(*self.results_tree.get_children())
        words = report.unique_words
        for word in words:
            self.results_tree.insert("", tk.END, values=(word, len(word)))
        self.count_var.set(f"{len(words)} words")

    def _copy_words(self) -> None:
        if not self.current_report or not self.current_report.words:
            messagebox.showinfo("No words", "No words available to copy yet.")
            return
        self.clipboard_clear()
        self.clipboard_append("\n".join(self.current_report.unique_words))
        self.update_idletasks()
        self.status_var.set("Words copied to clipboard.")

    def _save_results(self) -> None:
        if not self.current_report or self.solver is None:
            messagebox.showinfo("No results", "Generate at least once before exporting.")
            return

        json_path_str = filedialog.asksaveasfilename(
            title="Save results JSON (CSV will be saved alongside)",
            defaultextension=".json",
            filetypes=[("JSON files", "*.json"), ("All files", "*.*")],
        )
        if not json_path_str:
            return

        json_path = Path(json_path_str)
        csv_path = json_path.with_suffix(".csv")
        options = GeneratorOptions(
            min_word_length=self.solver.min_word_length,
            max_word_length=self.solver.max_word_length,
            use_speed_cache=self.speed_cache_var.get(),
        )

        try:
            export_report(
                json_path=json_path,
                csv_path=csv_path,
                report=self.current_report,
                wordlist_path=self.solver.wordlist_path,
                options=options,
            )
            self.status_var.set(f"Saved: {json_path.name} and {csv_path.name}")
            messagebox.showinfo("Export complete", f"Saved:\n{json_path}\n{csv_path}")
        except Exception as exc:
            self.logger.exception("Export failed")
            messagebox.showerror("Export error", f"Could not save results: {exc}")

    def _clear_input_and_results(self) -> None:
        self.letters_var.set("")
        self.results_tree.delete(*self.results_tree.get_children())
        self.count_var.set("")
        self.current_report = None
        self.status_var.set("Cleared input and results.")


def main() -> None:
    app = AnagramGeneratorApp()
    app.mainloop()


if __name__ == "__main__":
    main()
