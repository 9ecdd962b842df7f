from airsync.ui.cli import run

run()
