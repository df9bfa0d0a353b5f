# HTTP route blueprints
