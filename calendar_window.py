"""Dual calendar window (tkinter): one month grid plus a selected-date panel."""

from datetime import date, datetime
from typing import Callable
from tkinter import font as tkfont
import tkinter as tk

from calendar_logic import GREGORIAN, HIJRI, date_key, sunday_weekday, week_rows
from hijri import gregorian_to_hijri
from locale_text import (
    LANGUAGES,
    format_number,
    is_rtl,
    label,
    localize_digits,
    marked_count_text,
    month_name,
    weekday_full,
    weekday_short,
    weekend_days,
)
from session import (
    ChangeYear,
    GoToday,
    NavigateMonth,
    SelectDate,
    SetCalendarType,
    SetLanguage,
    ToggleMark,
    ToggleTheme,
    apply,
    initial_state,
    persistence_writes,
    picker_years,
    visible_grid,
    visible_month,
)
from settings import load_settings, save_setting

# Colours
ACCENT = "#8B5CF6"
TODAY_RING = "#FB923C"
MARK_BORDER = "#60A5FA"

LIGHT = {
    "bg": "white", "panel": "#F5F3FF", "fg": "#333333", "muted": "#777777",
    "sel_bg": ACCENT, "sel_fg": "white", "mark_bg": "#DBEAFE", "weekend": "#CC0000",
}
DARK = {
    "bg": "#1F2937", "panel": "#111827", "fg": "#E5E7EB", "muted": "#9CA3AF",
    "sel_bg": ACCENT, "sel_fg": "white", "mark_bg": "#1E3A8A", "weekend": "#F87171",
}


class CalendarWindow:
    """Single-month dual calendar driven by explicit session state."""

    def __init__(self) -> None:
        self.root = tk.Tk()
        self.root.resizable(False, False)

        self._setup_fonts()

        self.state = initial_state(load_settings(), date.today())

        # Widget-to-date mapping (filled during _render)
        self._widget_dates: dict[int, date] = {}
        self._layout_rtl: bool | None = None
        self._year_dialog: tk.Toplevel | None = None
        # Called with the new date when the clock passes midnight
        self.on_new_day: Callable[[date], None] | None = None
        self._clock_day = date.today()

        self._build_shell()
        self._render()
        self._tick()

        self.root.bind("<Escape>", lambda _e: self.hide())
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=10)
        self.font_bold = tkfont.Font(family=base, size=10, weight="bold")
        self.font_title = tkfont.Font(family=base, size=16, weight="bold")
        self.font_header = tkfont.Font(family=base, size=13, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")
        self.font_big = tkfont.Font(family=base, size=28, weight="bold")
        self.font_small = tkfont.Font(family=base, size=9)

    @property
    def _colors(self) -> dict:
        return DARK if self.state.dark_mode else LIGHT

    # ------------------------------------------------------------------
    # Build shell (once) — header, month card, side panel
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        self._outer = tk.Frame(self.root)
        self._outer.pack(padx=8, pady=6)

        # Header: title, clock, calendar/language switches, theme
        self._header = tk.Frame(self._outer)
        self._header.pack(fill="x", pady=(0, 6))
        self._title_lbl = tk.Label(self._header, font=self.font_title)
        self._subtitle_lbl = tk.Label(self._header, font=self.font_small)
        self._clock_lbl = tk.Label(self._header, font=self.font_bold)

        self._switches = tk.Frame(self._header)
        self._type_btns: dict[str, tk.Label] = {}
        for kind in (GREGORIAN, HIJRI):
            btn = tk.Label(self._switches, font=self.font_bold, cursor="hand2", padx=6)
            btn.bind("<Button-1>", lambda _e, k=kind: self._dispatch(SetCalendarType(k)))
            self._type_btns[kind] = btn
        self._lang_btns: dict[str, tk.Label] = {}
        for code, name in LANGUAGES:
            btn = tk.Label(self._switches, text=name, font=self.font_bold,
                           cursor="hand2", padx=6)
            btn.bind("<Button-1>", lambda _e, c=code: self._dispatch(SetLanguage(c)))
            self._lang_btns[code] = btn
        self._theme_btn = tk.Label(self._switches, font=self.font_nav, cursor="hand2", padx=6)
        self._theme_btn.bind("<Button-1>", lambda _e: self._dispatch(ToggleTheme()))

        self._body = tk.Frame(self._outer)
        self._body.pack()

        # Month card: nav row, caption, weekday headers, 6×7 cells
        self._card = tk.Frame(self._body, padx=6, pady=6)
        nav = tk.Frame(self._card)
        nav.pack(fill="x")
        self._nav = nav
        self._btn_prev = tk.Label(nav, font=self.font_nav, cursor="hand2", padx=6)
        self._btn_prev.bind("<Button-1>", lambda _e: self._dispatch(NavigateMonth(-1)))
        self._btn_next = tk.Label(nav, font=self.font_nav, cursor="hand2", padx=6)
        self._btn_next.bind("<Button-1>", lambda _e: self._dispatch(NavigateMonth(1)))
        self._month_lbl = tk.Label(nav, font=self.font_header)
        self._year_lbl = tk.Label(nav, font=self.font_header, fg=ACCENT, cursor="hand2")
        self._year_lbl.bind("<Button-1>", lambda _e: self.open_year_picker())

        self._caption_lbl = tk.Label(self._card, font=self.font_small)
        self._caption_lbl.pack()
        self._badge_lbl = tk.Label(self._card, font=self.font_small, bg=ACCENT,
                                   fg="white", padx=6)
        self._badge_lbl.pack(pady=(2, 4))

        self._grid = tk.Frame(self._card)
        self._grid.pack()
        self._day_headers: list[tk.Label] = [
            tk.Label(self._grid, font=self.font_bold, width=5) for _ in range(7)
        ]

        # Measure cell size to match a Label width=5
        _tmp = tk.Label(self.root, text="00", font=self.font_bold, width=5)
        _tmp.update_idletasks()
        cell_w = _tmp.winfo_reqwidth()
        cell_h = _tmp.winfo_reqheight() + 14
        _tmp.destroy()

        self._cells: list[list[tk.Canvas]] = []
        for _r in range(6):
            row_cells: list[tk.Canvas] = []
            for _c in range(7):
                cell = tk.Canvas(self._grid, width=cell_w, height=cell_h,
                                 highlightthickness=0, borderwidth=0)
                cell.bind("<Button-1>", self._on_cell_click)
                row_cells.append(cell)
            self._cells.append(row_cells)

        # Side panel: selected date, mark button, Hijri date, today
        self._side = tk.Frame(self._body, padx=10, pady=6)
        self._sel_title = tk.Label(self._side, font=self.font_bold)
        self._sel_title.pack(fill="x")
        self._today_badge = tk.Label(self._side, font=self.font_small, bg=TODAY_RING,
                                     fg="white", padx=6)
        self._sel_weekday = tk.Label(self._side, font=self.font_normal)
        self._sel_weekday.pack()
        self._sel_day = tk.Label(self._side, font=self.font_big)
        self._sel_day.pack()
        self._sel_month = tk.Label(self._side, font=self.font_normal)
        self._sel_month.pack()
        self._mark_btn = tk.Button(self._side, font=self.font_bold, relief="flat",
                                   fg="white", command=lambda: self._dispatch(ToggleMark()))
        self._mark_btn.pack(fill="x", pady=(8, 10))

        self._hijri_title = tk.Label(self._side, font=self.font_bold)
        self._hijri_title.pack(fill="x")
        self._hijri_day = tk.Label(self._side, font=self.font_header)
        self._hijri_day.pack()
        self._hijri_year = tk.Label(self._side, font=self.font_normal)
        self._hijri_year.pack()

        self._today_btn = tk.Button(
            self._side, font=self.font_bold, relief="groove",
            command=lambda: self._dispatch(GoToday(date.today())),
        )
        self._today_btn.pack(fill="x", pady=(10, 4))
        self._marked_lbl = tk.Label(self._side, font=self.font_small)
        self._marked_lbl.pack()

    # ------------------------------------------------------------------
    # Layout direction — re-pack only when the language flips LTR/RTL
    # ------------------------------------------------------------------
    def _apply_direction(self) -> None:
        rtl = is_rtl(self.state.language)
        if rtl == self._layout_rtl:
            return
        self._layout_rtl = rtl
        start, end = ("right", "left") if rtl else ("left", "right")
        near, far = ("e", "w") if rtl else ("w", "e")

        for w in (self._title_lbl, self._subtitle_lbl, self._clock_lbl, self._switches):
            w.pack_forget()
        self._title_lbl.pack(side=start)
        self._subtitle_lbl.pack(side=start, padx=6)
        self._switches.pack(side=end)
        self._clock_lbl.pack(side=end, padx=10)

        children = ([self._type_btns[GREGORIAN], self._type_btns[HIJRI]]
                    + [self._lang_btns[c] for c, _ in LANGUAGES] + [self._theme_btn])
        for w in children:
            w.pack_forget()
        for w in children:
            w.pack(side=start)

        for w in (self._btn_prev, self._btn_next, self._month_lbl, self._year_lbl):
            w.pack_forget()
        self._btn_prev.configure(text="▶" if rtl else "◀")
        self._btn_next.configure(text="◀" if rtl else "▶")
        self._btn_prev.pack(side=start)
        self._btn_next.pack(side=end)
        self._month_lbl.pack(side=start, expand=True, anchor=far)
        self._year_lbl.pack(side=start, expand=True, anchor=near)

        # Sunday column on the right for Arabic
        for c, hdr in enumerate(self._day_headers):
            hdr.grid(row=0, column=6 - c if rtl else c, pady=(0, 2))
        for r, row_cells in enumerate(self._cells):
            for c, cell in enumerate(row_cells):
                cell.grid(row=r + 1, column=6 - c if rtl else c, padx=1, pady=1)

        self._card.pack_forget()
        self._side.pack_forget()
        self._card.pack(side=start, anchor="n")
        self._side.pack(side=start, anchor="n", fill="y", padx=(6, 0))

    # ------------------------------------------------------------------
    # Render everything from self.state
    # ------------------------------------------------------------------
    def _render(self) -> None:
        self._apply_direction()
        st = self.state
        lang = st.language
        colors = self._colors

        self.root.title(label("title", lang))
        self._title_lbl.configure(text=label("title", lang))
        self._subtitle_lbl.configure(text=label("subtitle", lang))

        for kind, btn in self._type_btns.items():
            active = kind == st.calendar_type
            btn.configure(text=label(kind, lang), fg=ACCENT if active else colors["muted"])
        for code, btn in self._lang_btns.items():
            btn.configure(fg=ACCENT if code == lang else colors["muted"])
        self._theme_btn.configure(text="☀" if st.dark_mode else "☾")

        year, month = visible_month(st)
        self._month_lbl.configure(text=month_name(st.calendar_type, month, lang))
        self._year_lbl.configure(text=format_number(year, lang))
        self._caption_lbl.configure(text=self._caption_text())
        self._badge_lbl.configure(text=label(st.calendar_type, lang))

        weekend = weekend_days(lang)
        for c, hdr in enumerate(self._day_headers):
            hdr.configure(text=weekday_short(c, lang),
                          fg=colors["weekend"] if c in weekend else colors["fg"])

        self._fill_grid()
        self._fill_side_panel()
        self._paint_backgrounds()

    def _caption_text(self) -> str:
        st = self.state
        lang = st.language
        if st.calendar_type == GREGORIAN:
            h = gregorian_to_hijri(st.selected)
            return (f"{month_name(HIJRI, h.month, lang)} "
                    f"{format_number(h.year, lang)} {label('era', lang)}")
        return (f"{month_name(GREGORIAN, st.current.month, lang)} "
                f"{format_number(st.current.year, lang)}")

    def _fill_grid(self) -> None:
        self._widget_dates.clear()
        st = self.state
        colors = self._colors
        today = date.today()
        grid = week_rows(visible_grid(st))

        # Hijri grids number cells by Hijri day, Gregorian ones by date.day
        day_no = 0
        for r, row in enumerate(grid):
            for c, cell_info in enumerate(row):
                cell = self._cells[r][c]
                if cell_info.is_blank:
                    self._draw_cell(cell, "", colors["bg"], colors["fg"])
                    continue
                day_no += 1
                d = cell_info.date
                number = d.day if st.calendar_type == GREGORIAN else day_no
                is_sel = d == st.selected
                is_marked = date_key(d) in st.marked
                if is_sel:
                    bg, fg = colors["sel_bg"], colors["sel_fg"]
                elif is_marked:
                    bg, fg = colors["mark_bg"], colors["fg"]
                else:
                    bg, fg = colors["bg"], colors["fg"]
                self._draw_cell(
                    cell, format_number(number, st.language), bg, fg,
                    ring=TODAY_RING if d == today else
                    (MARK_BORDER if is_marked and not is_sel else None),
                    cursor="hand2",
                )
                self._widget_dates[id(cell)] = d

    def _fill_side_panel(self) -> None:
        st = self.state
        lang = st.language
        sel = st.selected

        self._sel_title.configure(text=label("selected_date", lang))
        if sel == date.today():
            self._today_badge.configure(text=label("today", lang))
            self._today_badge.pack(after=self._sel_title)
        else:
            self._today_badge.pack_forget()
        self._sel_weekday.configure(text=weekday_full(sunday_weekday(sel), lang))
        self._sel_day.configure(text=format_number(sel.day, lang))
        self._sel_month.configure(
            text=f"{month_name(GREGORIAN, sel.month, lang)} {format_number(sel.year, lang)}")

        marked = date_key(sel) in st.marked
        self._mark_btn.configure(
            text=("☆ " + label("unmark", lang)) if marked else ("★ " + label("mark", lang)),
            bg=TODAY_RING if marked else MARK_BORDER,
            activebackground=TODAY_RING if marked else MARK_BORDER,
        )

        h = gregorian_to_hijri(sel)
        self._hijri_title.configure(text=label("hijri_date", lang))
        self._hijri_day.configure(
            text=f"{format_number(h.day, lang)} {month_name(HIJRI, h.month, lang)}")
        self._hijri_year.configure(text=f"{format_number(h.year, lang)} {label('era', lang)}")

        self._today_btn.configure(text=label("go_today", lang))
        self._marked_lbl.configure(
            text=marked_count_text(len(st.marked), lang) if st.marked else "")

    def _paint_backgrounds(self) -> None:
        colors = self._colors
        panels = (self._outer, self._header, self._switches, self._body, self._card,
                  self._nav, self._grid)
        self.root.configure(bg=colors["bg"])
        for w in panels:
            w.configure(bg=colors["bg"])
        for w in (self._title_lbl, self._clock_lbl, self._month_lbl, self._btn_prev,
                  self._btn_next, *self._type_btns.values(), *self._lang_btns.values(),
                  self._theme_btn):
            w.configure(bg=colors["bg"])
        for w in (self._title_lbl, self._clock_lbl, self._month_lbl, self._btn_prev,
                  self._btn_next, self._theme_btn):
            w.configure(fg=colors["fg"])
        for w in (self._subtitle_lbl, self._caption_lbl):
            w.configure(bg=colors["bg"], fg=colors["muted"])
        self._year_lbl.configure(bg=colors["bg"])
        for hdr in self._day_headers:
            hdr.configure(bg=colors["bg"])

        self._side.configure(bg=colors["panel"])
        for w in (self._sel_title, self._sel_weekday, self._sel_day, self._sel_month,
                  self._hijri_title, self._hijri_day, self._hijri_year, self._marked_lbl):
            w.configure(bg=colors["panel"], fg=colors["fg"])
        self._today_btn.configure(bg=colors["panel"], fg=colors["fg"],
                                  activebackground=colors["bg"])

    # ------------------------------------------------------------------
    # Canvas cell drawing
    # ------------------------------------------------------------------
    def _draw_cell(self, cell: tk.Canvas, text: str, bg: str, fg: str,
                   ring: str | None = None, cursor: str = "") -> None:
        cell.delete("all")
        w = cell.winfo_width()
        h = cell.winfo_height()
        if w <= 1:
            w = int(cell["width"]) + 2
        if h <= 1:
            h = int(cell["height"]) + 2

        cell.configure(bg=self._colors["bg"])
        if text:
            cell.create_rectangle(2, 2, w - 3, h - 3, fill=bg,
                                  outline=ring or bg, width=2 if ring else 1)
            cell.create_text(w // 2, h // 2, text=text, fill=fg, font=self.font_bold)
        cell.configure(cursor=cursor)

    # ------------------------------------------------------------------
    # Events — every change goes through session.apply
    # ------------------------------------------------------------------
    def _dispatch(self, event) -> None:
        old = self.state
        self.state = apply(old, event)
        for key, value in persistence_writes(old, self.state).items():
            save_setting(key, value)
        self._render()

    def _on_cell_click(self, event: tk.Event) -> None:
        d = self._widget_dates.get(id(event.widget))
        if d:
            self._dispatch(SelectDate(d))

    # ------------------------------------------------------------------
    # Clock — once per second, independent of calendar state
    # ------------------------------------------------------------------
    def _tick(self) -> None:
        now = datetime.now()
        self._clock_lbl.configure(
            text=localize_digits(now.strftime("%H:%M:%S"), self.state.language))
        if now.date() != self._clock_day:
            self._clock_day = now.date()
            self._render()  # move the today ring and badge
            if self.on_new_day is not None:
                self.on_new_day(self._clock_day)
        self.root.after(1000, self._tick)

    # ------------------------------------------------------------------
    # Year picker dialog
    # ------------------------------------------------------------------
    def open_year_picker(self) -> None:
        if self._year_dialog is not None:
            self._year_dialog.destroy()
        lang = self.state.language
        colors = self._colors
        current_year, _month = visible_month(self.state)

        dlg = tk.Toplevel(self.root)
        dlg.title(label("select_year", lang))
        dlg.resizable(False, False)
        dlg.attributes("-topmost", True)
        dlg.configure(bg=colors["bg"])
        dlg.grab_set()
        self._year_dialog = dlg

        frame = tk.Frame(dlg, padx=10, pady=8, bg=colors["bg"])
        frame.pack()
        cols = 8
        rtl = is_rtl(lang)
        for i, year in enumerate(picker_years(self.state, date.today())):
            r, c = divmod(i, cols)
            active = year == current_year
            btn = tk.Label(
                frame, text=format_number(year, lang), font=self.font_normal,
                width=6, cursor="hand2", relief="groove",
                bg=ACCENT if active else colors["bg"],
                fg="white" if active else colors["fg"],
            )
            btn.grid(row=r, column=cols - 1 - c if rtl else c, padx=1, pady=1)
            btn.bind("<Button-1>", lambda _e, y=year: self._pick_year(y))

        dlg.bind("<Escape>", lambda _e: self._close_year_picker())
        dlg.protocol("WM_DELETE_WINDOW", self._close_year_picker)

    def _pick_year(self, year: int) -> None:
        self._close_year_picker()
        self._dispatch(ChangeYear(year))

    def _close_year_picker(self) -> None:
        if self._year_dialog is not None:
            self._year_dialog.destroy()
            self._year_dialog = None

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def go_today(self) -> None:
        self._dispatch(GoToday(date.today()))
        self.show()

    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self._render()
        self.root.deiconify()
        self._position_window()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        self._close_year_picker()
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Position bottom-right of the screen
    # ------------------------------------------------------------------
    def _position_window(self) -> None:
        self.root.update_idletasks()
        win_w = self.root.winfo_reqwidth()
        win_h = self.root.winfo_reqheight()
        x = self.root.winfo_screenwidth() - win_w - 12
        y = self.root.winfo_screenheight() - win_h - 60
        self.root.geometry(f"+{max(0, x)}+{max(0, y)}")
