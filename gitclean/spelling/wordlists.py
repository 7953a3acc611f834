"""Built-in word tables for commit message spell checking.

Both tables are lowercase and read-only. TECHNICAL_WORDS is never flagged;
COMMON_TYPOS maps a known misspelling to its single correction and wins over
the general dictionary.
"""

from types import MappingProxyType

TECHNICAL_WORDS = frozenset({
    # Languages, frameworks and front-end tooling
    'api', 'cli', 'ui', 'ux', 'dom', 'json', 'xml', 'html', 'css', 'js', 'ts',
    'npm', 'yarn', 'pnpm', 'webpack', 'vite', 'rollup', 'babel', 'eslint',
    'prettier', 'typescript', 'javascript', 'node', 'nodejs', 'react', 'vue',
    'angular', 'svelte', 'scss', 'sass', 'less', 'tailwind', 'bootstrap',
    'css3', 'html5', 'jsx', 'tsx', 'python', 'pytest', 'django', 'flask',
    'fastapi', 'golang', 'rust', 'kotlin',

    # Git and version control
    'git', 'github', 'gitlab', 'bitbucket', 'commit', 'push', 'pull', 'merge',
    'rebase', 'checkout', 'branch', 'tag', 'stash', 'clone', 'fork',
    'upstream', 'origin', 'remote', 'gitignore', 'gitconfig', 'gitflow', 'pr',
    'mr', 'repo', 'repository', 'submodule', 'workflow', 'actions', 'hooks',
    'changelog', 'semver',

    # DevOps and cloud
    'docker', 'kubernetes', 'k8s', 'aws', 'azure', 'gcp', 'vercel', 'netlify',
    'heroku', 'ci', 'cd', 'devops', 'oauth', 'jwt', 'cors', 'csrf', 'ssl',
    'tls', 'nginx', 'apache', 'helm', 'terraform', 'ansible', 'jenkins',

    # Protocols and networking
    'http', 'https', 'tcp', 'udp', 'ssh', 'ftp', 'smtp', 'pop3', 'imap',
    'dns', 'url', 'uri', 'uuid', 'regex', 'websocket', 'graphql', 'rest',
    'soap', 'grpc',

    # Databases
    'sql', 'nosql', 'mongodb', 'mysql', 'postgresql', 'postgres', 'sqlite',
    'redis', 'elasticsearch', 'firebase', 'supabase', 'prisma', 'orm', 'crud',
    'db',

    # Architecture and patterns
    'microservices', 'microservice', 'monolith', 'serverless', 'jamstack',
    'spa', 'ssr', 'ssg', 'pwa', 'mvc', 'mvp', 'mvvm', 'sdk', 'gui',

    # Tech concepts
    'blockchain', 'cryptocurrency', 'ai', 'ml', 'nlp', 'iot', 'ar', 'vr',
    'refactor', 'refactoring', 'optimization', 'minification', 'bundling',
    'transpilation', 'polyfill', 'shim', 'middleware', 'plugin', 'addon',

    # File formats and configs
    'md', 'txt', 'log', 'yml', 'yaml', 'toml', 'ini', 'cfg', 'conf', 'env',
    'dockerfile', 'makefile', 'rakefile', 'gemfile', 'procfile', 'lockfile',

    # Development terms
    'config', 'prod', 'dev', 'staging', 'localhost', 'async', 'await',
    'promise', 'callback', 'event', 'listener', 'handler', 'component',
    'module', 'package', 'library', 'framework', 'boilerplate', 'template',
    'scaffold', 'generator', 'linter', 'formatter', 'transpiler', 'compiler',

    # Common abbreviations
    'app', 'auth', 'util', 'utils', 'lib', 'libs', 'src', 'dist', 'build',
    'bin', 'test', 'spec', 'mock', 'stub', 'tmp', 'temp', 'www', 'admin',
    'user', 'users', 'client', 'server', 'backend', 'frontend', 'fullstack',
    'deployment', 'infrastructure', 'monitoring', 'logging', 'analytics',
    'metrics', 'dashboard', 'sidebar', 'navbar', 'footer', 'header', 'modal',
    'popup', 'tooltip', 'dropdown', 'carousel', 'accordion', 'tabs',
    'pagination', 'breadcrumb', 'stepper', 'wizard',

    # Package managers and tools
    'homebrew', 'chocolatey', 'apt', 'yum', 'pacman', 'conda', 'pip', 'gem',
    'composer', 'maven', 'gradle', 'nuget', 'cargo', 'go',

    # Testing
    'jest', 'mocha', 'chai', 'cypress', 'selenium', 'puppeteer', 'playwright',
    'vitest', 'karma', 'jasmine', 'enzyme', 'testing', 'unittest', 'e2e',
})

COMMON_TYPOS = MappingProxyType({
    # General English
    'teh': 'the',
    'hte': 'the',
    'adn': 'and',
    'nad': 'and',
    'recieve': 'receive',
    'recieved': 'received',
    'recieving': 'receiving',
    'seperate': 'separate',
    'seperated': 'separated',
    'seperately': 'separately',
    'definately': 'definitely',
    'occured': 'occurred',
    'occuring': 'occurring',
    'perfomance': 'performance',
    'perfom': 'perform',
    'sucessful': 'successful',
    'sucessfully': 'successfully',
    'acording': 'according',
    'adress': 'address',
    'begining': 'beginning',
    'beleive': 'believe',
    'buiness': 'business',
    'diference': 'difference',
    'enviroment': 'environment',
    'existance': 'existence',
    'finaly': 'finally',
    'foriegn': 'foreign',
    'goverment': 'government',
    'gaurd': 'guard',
    'happend': 'happened',
    'immediatly': 'immediately',
    'independant': 'independent',
    'intrested': 'interested',
    'libary': 'library',
    'maintainance': 'maintenance',
    'occassion': 'occasion',
    'prefered': 'preferred',
    'reccomend': 'recommend',
    'thier': 'their',
    'truely': 'truly',
    'usualy': 'usually',
    'wierd': 'weird',
    'calender': 'calendar',
    'accomodate': 'accommodate',
    'achive': 'achieve',
    'achived': 'achieved',

    # Programming
    'commited': 'committed',
    'commiting': 'committing',
    'committ': 'commit',
    'implmentation': 'implementation',
    'implimentation': 'implementation',
    'documention': 'documentation',
    'confguration': 'configuration',
    'configuraton': 'configuration',
    'functionallity': 'functionality',
    'conditon': 'condition',
    'lenght': 'length',
    'widht': 'width',
    'heigth': 'height',
    'compatability': 'compatibility',
    'dependancy': 'dependency',
    'optmize': 'optimize',
    'optmized': 'optimized',
    'optmization': 'optimization',
    'intialize': 'initialize',
    'intializing': 'initializing',
    'intial': 'initial',
    'retrun': 'return',
    'reutrn': 'return',
    'funciton': 'function',
    'fucntion': 'function',
    'fucntions': 'functions',
    'valriable': 'variable',
    'varaible': 'variable',
    'varibles': 'variables',
    'methdo': 'method',
    'methos': 'method',
    'classs': 'class',
    'clases': 'classes',
    'contructor': 'constructor',
    'contsructor': 'constructor',
    'compnent': 'component',
    'componnet': 'component',
    'compoent': 'component',
    'reponse': 'response',
    'respone': 'response',
    'reqeust': 'request',
    'requst': 'request',
    'databse': 'database',
    'datbase': 'database',
    'serivce': 'service',
    'servie': 'service',
    'handlr': 'handler',
    'handleer': 'handler',
    'handls': 'handles',
    'listner': 'listener',
    'lsitener': 'listener',
    'connecton': 'connection',
    'conection': 'connection',
    'authetication': 'authentication',
    'athentication': 'authentication',
    'authentification': 'authentication',
    'authroization': 'authorization',
    'validaton': 'validation',
    'valiation': 'validation',
    'bugfixes': 'bug fixes',
    'hotfixes': 'hot fixes',
    'updat': 'update',
    'updte': 'update',
    'udpate': 'update',
    'tsting': 'testing',
    'tesitng': 'testing',
    'testig': 'testing',
})
