from ghexport.cli import app

app()
