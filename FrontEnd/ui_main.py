from PySide6.QtWidgets import (
	QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QTableWidget, QTableWidgetItem,
	QSizePolicy, QScrollArea
)
from PySide6.QtCore import Qt
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from BackEnd.core import config
from BackEnd.core.clock import fmt_hms, local_today_str
from BackEnd.services.fee_calc import fmt_money
from FrontEnd.components.footer_today import FooterToday
from FrontEnd.components.table_card import TableCard
from FrontEnd.styles.design_tokens import COLORS, stylesheet


class MainWindow(QMainWindow):
	def __init__(self, timer_service):
		super().__init__()
		self.setWindowTitle("K1NGS Table Tracker")
		self.resize(1200, 760)
		self.setStyleSheet(stylesheet())

		self.timer_service = timer_service
		self.store = timer_service.store

		outer = QVBoxLayout()
		outer.setContentsMargins(24, 24, 24, 24)
		outer.setSpacing(16)

		title = QLabel("K1NGS Table Tracker")
		title.setStyleSheet(f"font-size: 24px; font-weight: bold; color: {COLORS['text_strong']};")
		outer.addWidget(title)

		top = QHBoxLayout()
		top.addWidget(self._build_summary_table(), 3)
		top.addWidget(self._build_fee_chart(), 2)
		outer.addLayout(top)
		outer.addWidget(self._build_cards())

		self.footer_today = FooterToday(local_today_str())
		outer.addWidget(self.footer_today)

		container = QWidget()
		container.setLayout(outer)
		self.setCentralWidget(container)

		self.timer_service.tick.connect(self._on_tick)
		self.timer_service.state_changed.connect(self._on_state)
		self.timer_service.saved.connect(self._on_saved)
		self.timer_service.save_failed.connect(self._on_save_failed)

		self._refresh_all()
		self._update_fee_chart()

	def closeEvent(self, event):
		# Timers stop with the window; data is only written on Stop & Save
		self.timer_service.shutdown()
		super().closeEvent(event)

	def _build_summary_table(self):
		self.summary_table = QTableWidget()
		self.summary_table.setColumnCount(4)
		self.summary_table.setHorizontalHeaderLabels(["Table", "Player", "Elapsed Time", "Total Fees"])
		self.summary_table.setRowCount(len(self.store))
		self.summary_table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
		self.summary_table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
		self.summary_table.verticalHeader().setVisible(False)
		self.summary_table.horizontalHeader().setStretchLastSection(True)
		self.summary_table.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		return self.summary_table

	def _build_fee_chart(self):
		# Bar chart (matplotlib)
		self.figure = Figure(figsize=(4, 2.5))
		self.canvas = FigureCanvas(self.figure)
		return self.canvas

	def _build_cards(self):
		row = QWidget()
		layout = QHBoxLayout()
		layout.setSpacing(16)
		self.cards = []
		for index, session in enumerate(self.store.all()):
			card = TableCard(index, session)
			card.start_clicked.connect(self.timer_service.start)
			card.pause_clicked.connect(self.timer_service.pause)
			card.stop_clicked.connect(self.timer_service.stop)
			card.player_changed.connect(self._on_player_changed)
			card.rate_entered.connect(self._on_rate_entered)
			layout.addWidget(card)
			self.cards.append(card)
		layout.addStretch()
		row.setLayout(layout)

		scroll = QScrollArea()
		scroll.setWidgetResizable(True)
		scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAsNeeded)
		scroll.setWidget(row)
		return scroll

	def _refresh_row(self, index):
		session = self.store.get(index)
		self.summary_table.setItem(index, 0, QTableWidgetItem(session.label))
		self.summary_table.setItem(index, 1, QTableWidgetItem(session.player_name or "-"))
		self.summary_table.setItem(index, 2, QTableWidgetItem(fmt_hms(session.elapsed_sec)))
		self.summary_table.setItem(index, 3, QTableWidgetItem(f"{config.CURRENCY}{fmt_money(session.total_fees)}"))
		self.cards[index].refresh(session)

	def _refresh_all(self):
		for index in range(len(self.store)):
			self._refresh_row(index)
		self._update_today_label()

	def _update_today_label(self):
		sessions = self.store.all()
		self.footer_today.set_totals(
			local_today_str(),
			sum(s.total_fees for s in sessions),
			sum(1 for s in sessions if s.active),
		)

	def _update_fee_chart(self):
		sessions = self.store.all()
		x = [str(s.table_number) for s in sessions]
		y = [s.total_fees for s in sessions]

		self.figure.clear()
		self.figure.patch.set_alpha(0.0)
		ax = self.figure.add_subplot(111)
		ax.set_facecolor(COLORS['background'])
		bars = ax.bar(x, y, color=COLORS['bar'], edgecolor=COLORS['bar_edge'], linewidth=1.2)
		for bar, value in zip(bars, y):
			if value > 0:
				ax.text(bar.get_x() + bar.get_width()/2, bar.get_height(),
				       f'{value:.0f}', ha='center', va='bottom', fontsize=9, color=COLORS['text_strong'])
		ax.set_xlabel("Table", fontsize=10, color=COLORS['text_strong'])
		ax.set_ylabel(f"Fees ({config.CURRENCY})", fontsize=10, color=COLORS['text_strong'])
		ax.set_title("Fees Today", fontsize=12, fontweight='bold', color=COLORS['text_strong'])
		ax.set_ylim(bottom=0)
		ax.grid(True, axis='y', alpha=0.25, linestyle='--')
		ax.set_axisbelow(True)
		for spine in ['top', 'right']:
			ax.spines[spine].set_visible(False)
		self.figure.tight_layout()
		self.canvas.draw()

	def _on_tick(self, index, elapsed):
		self.summary_table.setItem(index, 2, QTableWidgetItem(fmt_hms(elapsed)))
		self.cards[index].timer_label.setText(fmt_hms(elapsed))

	def _on_state(self, index, state):
		self._refresh_row(index)
		self._update_today_label()
		if state == "stopped":
			self._update_fee_chart()

	def _on_player_changed(self, index, name):
		self.timer_service.set_player(index, name)
		self.summary_table.setItem(index, 1, QTableWidgetItem(name or "-"))

	def _on_rate_entered(self, index, text):
		if not self.timer_service.set_rate(index, text):
			# keep showing the rate that is actually in effect
			self.cards[index].reset_rate(self.store.get(index).hourly_rate)
			self.statusBar().showMessage(f"Invalid hourly rate: {text!r}", 5000)

	def _on_saved(self, path):
		self.statusBar().showMessage(f"Session data saved to {path}", 5000)

	def _on_save_failed(self, message):
		self.statusBar().showMessage(f"Save failed: {message}", 10000)
