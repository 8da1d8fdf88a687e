from work_history.cli import app

if __name__ == "__main__":
    app()
