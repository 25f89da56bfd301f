from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel

from BackEnd.core import config
from BackEnd.services.fee_calc import fmt_money
from FrontEnd.styles.design_tokens import COLORS

class FooterToday(QWidget):
    """Day-tab name on the left, running tables and billed total on the right."""
    def __init__(self, date_text):
        super().__init__()
        layout = QHBoxLayout()
        self.date_label = QLabel(date_text)
        self.running_label = QLabel()
        self.total_label = QLabel()
        self.total_label.setObjectName("TodayLabel")
        layout.addWidget(self.date_label)
        layout.addStretch()
        layout.addWidget(self.running_label)
        layout.addSpacing(24)
        layout.addWidget(self.total_label)
        self.setLayout(layout)
        self.setStyleSheet(f"background: {COLORS['footer_bg']}; border-radius: 16px; padding: 8px 24px; color: {COLORS['footer_text']}; font-size: 16px; font-weight: 500;")

    def set_totals(self, date_text, total_fees, running):
        self.date_label.setText(date_text)
        self.running_label.setText(f"Running: {running}")
        self.total_label.setText(f"Today: {config.CURRENCY}{fmt_money(total_fees)}")
