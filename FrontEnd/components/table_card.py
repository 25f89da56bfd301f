from PySide6.QtCore import Signal
from PySide6.QtWidgets import QFrame, QFormLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton, QVBoxLayout

from BackEnd.core import config
from BackEnd.core.clock import fmt_hms
from BackEnd.services.fee_calc import fmt_money
from FrontEnd.styles.design_tokens import COLORS


class TableCard(QFrame):
    """Controls for one table: player, rate, timer readout and Start/Pause/Stop."""

    start_clicked = Signal(int)
    pause_clicked = Signal(int)
    stop_clicked = Signal(int)
    player_changed = Signal(int, str)
    rate_entered = Signal(int, str)

    def __init__(self, index, session):
        super().__init__()
        self.index = index
        self.setObjectName("TableCard")
        self.setFixedWidth(220)

        layout = QVBoxLayout()
        self.title = QLabel(session.label)
        self.title.setObjectName("CardTitle")
        layout.addWidget(self.title)

        form = QFormLayout()
        self.player_edit = QLineEdit(session.player_name)
        self.rate_edit = QLineEdit(f"{session.hourly_rate:g}")
        form.addRow("Player Name:", self.player_edit)
        form.addRow("Hourly Rate:", self.rate_edit)
        layout.addLayout(form)

        self.timer_label = QLabel(fmt_hms(session.elapsed_sec))
        self.timer_label.setObjectName("CardTimer")
        self.fees_label = QLabel()
        self.state_label = QLabel()
        layout.addWidget(self.timer_label)
        layout.addWidget(self.fees_label)
        layout.addWidget(self.state_label)

        btns = QHBoxLayout()
        self.start_btn = QPushButton("Start")
        self.pause_btn = QPushButton("Pause")
        self.stop_btn = QPushButton("Stop && Save")
        for btn in (self.start_btn, self.pause_btn, self.stop_btn):
            btns.addWidget(btn)
        layout.addLayout(btns)
        self.setLayout(layout)

        self.start_btn.clicked.connect(lambda: self.start_clicked.emit(self.index))
        self.pause_btn.clicked.connect(lambda: self.pause_clicked.emit(self.index))
        self.stop_btn.clicked.connect(lambda: self.stop_clicked.emit(self.index))
        self.player_edit.textEdited.connect(lambda text: self.player_changed.emit(self.index, text))
        self.rate_edit.editingFinished.connect(lambda: self.rate_entered.emit(self.index, self.rate_edit.text()))

        self.refresh(session)

    def refresh(self, session):
        self.timer_label.setText(fmt_hms(session.elapsed_sec))
        self.fees_label.setText(f"Total Fees: {config.CURRENCY}{fmt_money(session.total_fees)}")
        state = session.state
        self.state_label.setText(state.capitalize())
        self.state_label.setStyleSheet(f"color: {COLORS.get(state, COLORS['idle'])}; font-weight: 600;")
        self.start_btn.setEnabled(session.can_start)
        self.pause_btn.setEnabled(session.can_pause)
        self.stop_btn.setEnabled(session.can_stop)

    def reset_rate(self, rate):
        self.rate_edit.setText(f"{rate:g}")
