"""hashedpass quickstart: hash, store, verify, upgrade."""

from hashedpass import DigestAlgorithm, HashedCredential, Hasher, HasherConfig, Hmac

# 1. Hash with the defaults (PBKDF2-SHA256, 4096 iterations, 30-letter salt)
hasher = Hasher()
stored = hasher.hash("correct horse battery staple")
print(stored)

# 2. Verify a login attempt
print("match:", hasher.verify("correct horse battery staple", stored))
print("match:", hasher.verify("Tr0ub4dor&3", stored))

# 3. Pick a method explicitly
cred = HashedCredential.create("s3cret", Hmac(digest=DigestAlgorithm.sha512))
print(cred.method, cred.verify("s3cret"))

# 4. Spot legacy hashes that should be re-hashed on next login
legacy = "00b902718d496f07b86e4fc32df31083f2c82690$hash_sha1$WffQVliOqZkUORlHDlHPux"
strict = Hasher(HasherConfig(method="pbkdf2_sha512_100000"))
print("needs update:", strict.needs_update(legacy))
