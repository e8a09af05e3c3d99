from workstream_cockpit.presentation.cli import run

run()
