from account_admin.main import create_app

app = create_app()
