from socialapp.database import Base, engine
import socialapp.models  # registers every model on Base.metadata

print("Creating database tables...")
Base.metadata.create_all(bind=engine)
print("✅ All tables created successfully!")
