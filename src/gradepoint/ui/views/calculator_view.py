import flet as ft

from gradepoint.core.gpa import GOOD_STANDING, Summary
from gradepoint.core.grades import grade_reference
from gradepoint.state.app_state import AppState
from gradepoint.state.subject_row import SubjectRow


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


def _summary_line(label: str, value: ft.Text) -> ft.Row:
    return ft.Row(
        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        controls=[ft.Text(label, color=ft.Colors.GREY_600), value],
    )


def _build_reference_table() -> ft.Column:
    rows = [
        ft.Row(
            width=160,
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            controls=[ft.Text(grade, color=ft.Colors.GREY_600), ft.Text(points, weight=ft.FontWeight.BOLD)],
        )
        for grade, points in grade_reference()
    ]
    return ft.Column(
        spacing=4,
        controls=[ft.Text("Grade Standards", size=14, weight=ft.FontWeight.BOLD), *rows],
    )


def build_calculator_view(page: ft.Page, app_state: AppState) -> ft.View:
    rows_column = ft.Column(spacing=8)

    cgpa_text = ft.Text(size=40, weight=ft.FontWeight.BOLD, color=ft.Colors.INDIGO_600)
    credits_text = ft.Text(weight=ft.FontWeight.BOLD)
    subjects_text = ft.Text(weight=ft.FontWeight.BOLD)
    status_text = ft.Text(weight=ft.FontWeight.BOLD)

    def render_summary(summary: Summary) -> None:
        cgpa_text.value = summary.cgpa_display
        credits_text.value = _format_number(summary.total_credits)
        subjects_text.value = str(summary.total_subjects)
        status_text.value = summary.status
        status_text.color = ft.Colors.GREEN_600 if summary.status == GOOD_STANDING else ft.Colors.RED_400

    def build_row(index: int, row: SubjectRow) -> ft.Row:
        def on_name_change(e: ft.ControlEvent) -> None:
            app_state.set_name(row.id, e.control.value or "")

        def on_grade_change(e: ft.ControlEvent) -> None:
            app_state.set_grade(row.id, e.control.value)

        def on_credits_change(e: ft.ControlEvent) -> None:
            app_state.set_credits_text(row.id, e.control.value)

        def on_credits_blur(e: ft.ControlEvent) -> None:
            current = app_state.find_row(row.id)
            if current is not None:
                e.control.value = _format_number(current.credits)
                page.update()

        def on_remove(_):
            app_state.remove_subject(row.id)
            render_rows()
            page.update()

        return ft.Row(
            controls=[
                ft.Text(str(index), width=28, color=ft.Colors.GREY_500),
                ft.TextField(
                    value=row.name,
                    hint_text="e.g. Mathematics II",
                    expand=True,
                    on_change=on_name_change,
                ),
                ft.Dropdown(
                    width=130,
                    value=row.grade,
                    options=[
                        ft.dropdown.Option(key=grade, text=f"{grade} ({points})")
                        for grade, points in grade_reference()
                    ],
                    on_change=on_grade_change,
                ),
                ft.TextField(
                    value=_format_number(row.credits),
                    width=90,
                    keyboard_type=ft.KeyboardType.NUMBER,
                    input_filter=ft.InputFilter(regex_string=r"^\d*\.?\d*$", allow=True),
                    on_change=on_credits_change,
                    on_blur=on_credits_blur,
                ),
                ft.IconButton(icon=ft.Icons.DELETE_OUTLINE, tooltip="Remove", on_click=on_remove),
            ],
        )

    def render_rows() -> None:
        rows_column.controls.clear()
        for position, row in enumerate(app_state.rows):
            rows_column.controls.append(build_row(position + 1, row))

    def on_add(_):
        app_state.add_subject()
        render_rows()
        page.update()

    def on_reset(_):
        app_state.reset()
        render_rows()
        page.update()

    def on_summary_change(summary: Summary) -> None:
        render_summary(summary)
        page.update()

    app_state.on_change = on_summary_change

    render_rows()
    render_summary(app_state.summary)

    return ft.View(
        route="/",
        controls=[
            ft.AppBar(
                title=ft.Text("GradePoint - CGPA Calculator"),
                actions=[ft.TextButton("Reset", icon=ft.Icons.REFRESH, on_click=on_reset)],
            ),
            ft.Container(
                padding=20,
                content=ft.Column(
                    scroll=ft.ScrollMode.AUTO,
                    controls=[
                        ft.Row(
                            controls=[
                                ft.Text("No.", width=28, weight=ft.FontWeight.BOLD),
                                ft.Text("Subject Name", expand=True, weight=ft.FontWeight.BOLD),
                                ft.Text("Grade", width=130, weight=ft.FontWeight.BOLD),
                                ft.Text("Credits", width=90, weight=ft.FontWeight.BOLD),
                                ft.Container(width=40),
                            ]
                        ),
                        rows_column,
                        ft.Button("Add Subject", icon=ft.Icons.ADD, on_click=on_add),
                        ft.Divider(),
                        ft.Card(
                            content=ft.Container(
                                padding=16,
                                content=ft.Column(
                                    controls=[
                                        ft.Text("Summary", size=20, weight=ft.FontWeight.BOLD),
                                        ft.Text("Current CGPA", color=ft.Colors.GREY_600),
                                        cgpa_text,
                                        _summary_line("Total Credits", credits_text),
                                        _summary_line("Total Subjects", subjects_text),
                                        ft.Divider(),
                                        _summary_line("Status", status_text),
                                    ]
                                ),
                            )
                        ),
                        _build_reference_table(),
                    ],
                ),
            ),
        ],
    )
