import os, sys
from PyQt6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QPushButton,
    QFileDialog,
    QLabel,
    QTextEdit,
    QHBoxLayout,
    QTabWidget,
    QFormLayout,
    QSpinBox,
    QCheckBox,
)
from PyQt6.QtCore import QProcess, QProcessEnvironment
from PyQt6.QtGui import QGuiApplication
import qdarkstyle

import pepview.config as cfg

def pipeline_command(csv_file):
    return [sys.executable, "-u", "-m", "pepview", csv_file]

def pipeline_environment():
    """Settings handed to the pipeline child process."""
    return {
        "PEPVIEW_PEPTIDE_COL": str(cfg.PEPTIDE_COL_INDEX),
        "PEPVIEW_TOOL_TIMEOUT": str(cfg.TOOL_TIMEOUT),
        "PEPVIEW_SKIP_MALFORMED": "1" if cfg.SKIP_MALFORMED_ROWS else "0",
    }

class PipelineWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Peptide BLAST Pipeline")
        self.setGeometry(100, 100, 800, 600)

        tabs = QTabWidget()
        self.setCentralWidget(tabs)

        tab1 = QWidget()
        tab2 = QWidget()

        self.pipeline_tab_ui(tab1)
        self.config_tab_ui(tab2)

        tabs.addTab(tab1, "pipeline")
        tabs.addTab(tab2, "config")

    def pipeline_tab_ui(self, central_widget):
        layout = QVBoxLayout(central_widget)

        self.file_label = QLabel("No peptide CSV selected")
        layout.addWidget(self.file_label)

        file_layout = QHBoxLayout()
        self.file_button = QPushButton("Select Peptide CSV")
        self.file_button.clicked.connect(self.pick_file)
        file_layout.addWidget(self.file_button)
        layout.addLayout(file_layout)

        self.run_button = QPushButton("Run Pipeline")
        self.run_button.clicked.connect(self.run_pipeline_process)
        layout.addWidget(self.run_button)

        self.stop_button = QPushButton("Stop Pipeline")
        self.stop_button.clicked.connect(self.stop_pipeline)
        self.stop_button.setEnabled(False)
        layout.addWidget(self.stop_button)

        self.status_output = QTextEdit()
        self.status_output.setReadOnly(True)
        layout.addWidget(self.status_output)

        self.csv_file = None
        self.pipeline_proc = None
        self.log_file = None

        return layout

    def config_tab_ui(self, central_widget):
        layout = QFormLayout(central_widget)

        self.sb_column = QSpinBox(central_widget)
        self.sb_column.setRange(0, 1000)
        self.sb_column.setValue(cfg.PEPTIDE_COL_INDEX)
        self.sb_column.valueChanged.connect(
            lambda v: setattr(cfg, "PEPTIDE_COL_INDEX", v)
        )
        layout.addRow("PEPTIDE_COL_INDEX:", self.sb_column)

        self.sb_timeout = QSpinBox(central_widget)
        self.sb_timeout.setRange(1, 7 * 24 * 3600)
        self.sb_timeout.setValue(int(cfg.TOOL_TIMEOUT))
        self.sb_timeout.valueChanged.connect(
            lambda v: setattr(cfg, "TOOL_TIMEOUT", float(v))
        )
        layout.addRow("TOOL_TIMEOUT (s):", self.sb_timeout)

        self.cb_skip = QCheckBox(central_widget)
        self.cb_skip.setChecked(cfg.SKIP_MALFORMED_ROWS)
        self.cb_skip.toggled.connect(
            lambda v: setattr(cfg, "SKIP_MALFORMED_ROWS", v)
        )
        layout.addRow("SKIP_MALFORMED_ROWS:", self.cb_skip)

        return layout

    def pick_file(self):
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open Peptide CSV", "", "CSV Files (*.csv);;All Files (*)"
        )
        if file_path:
            self.csv_file = file_path
            self.file_label.setText(f"Peptide CSV: {file_path}")
        else:
            self.csv_file = None
            self.file_label.setText("No peptide CSV selected")

    def open_log(self, csv_file):
        log_dir = os.path.join(os.path.dirname(os.path.abspath(csv_file)), cfg.LOG_DIR_NAME)
        try:
            os.makedirs(log_dir, exist_ok=True)
            self.log_file = open(os.path.join(log_dir, "pipeline.log"), 'w')
        except OSError:
            self.log_file = None
            self.log(f"Could not write to {log_dir}")

    def log(self, msg):
        if self.log_file:
            self.log_file.write(msg)
            self.log_file.write('\n')
            self.log_file.flush()
        self.status_output.append(msg)
        QApplication.processEvents()  # update GUI

    def run_pipeline_process(self):
        if self.pipeline_proc and self.pipeline_proc.state() != QProcess.ProcessState.NotRunning:
            return
        if not self.csv_file:
            self.log("No peptide CSV selected.")
            return

        self.open_log(self.csv_file)

        self.pipeline_proc = QProcess(self)
        self.pipeline_proc.setProcessChannelMode(QProcess.ProcessChannelMode.MergedChannels)

        env = QProcessEnvironment.systemEnvironment()
        for key, value in pipeline_environment().items():
            env.insert(key, value)
        self.pipeline_proc.setProcessEnvironment(env)

        self.pipeline_proc.readyReadStandardOutput.connect(self.handle_stdout)
        self.pipeline_proc.finished.connect(self.on_pipeline_finished)

        cmd = pipeline_command(self.csv_file)
        self.log(f"Starting pipeline: {' '.join(cmd)}")
        self.pipeline_proc.start(cmd[0], cmd[1:])

        self.run_button.setEnabled(False)
        self.stop_button.setEnabled(True)

    def handle_stdout(self):
        data = self.pipeline_proc.readAllStandardOutput().data().decode(errors="replace")
        for line in data.splitlines():
            self.log(line)

    def stop_pipeline(self):
        if self.pipeline_proc and self.pipeline_proc.state() != QProcess.ProcessState.NotRunning:
            self.pipeline_proc.kill()  # hard kill
            self.pipeline_proc = None
            self.log("Pipeline process killed by user.")
            self.run_button.setEnabled(True)
            self.stop_button.setEnabled(False)

    def on_pipeline_finished(self, exitCode, exitStatus):
        self.log(f"Pipeline finished with code {exitCode}")
        self.run_button.setEnabled(True)
        self.stop_button.setEnabled(False)
        if self.log_file:
            self.log_file.close()
            self.log_file = None

    def closeEvent(self, event):
        self.stop_pipeline()
        event.accept()

if __name__ == "__main__":
    QGuiApplication.setDesktopFileName("com.github.pepview")
    app = QApplication(sys.argv)
    app.setApplicationName("PeptidePipeline")
    app.setApplicationDisplayName("Peptide BLAST Pipeline")
    app.setApplicationVersion("1.0")
    app.setStyleSheet(qdarkstyle.load_stylesheet(qt_api="pyqt6"))
    window = PipelineWindow()
    window.show()
    sys.exit(app.exec())
